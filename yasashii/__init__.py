"""やさしい日本語辞書: simple Japanese dictionary backed by Gemini."""

__version__ = "0.1.0"
