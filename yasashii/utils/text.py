from __future__ import annotations

import re

# ASCII and full-width parentheses. The model is told not to emit them.
_BRACKETS_RE = re.compile(r"[()（）]")


def strip_brackets(text: str) -> str:
    """Remove ASCII and full-width parentheses from model text."""
    if not text:
        return ""
    return _BRACKETS_RE.sub("", text)
