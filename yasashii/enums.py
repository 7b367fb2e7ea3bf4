from enum import Enum


class Role(str, Enum):
    """Speaker of a conversation turn."""
    USER = "user"
    MODEL = "model"


class Phase(str, Enum):
    """Derived UI phase of a dictionary session."""
    WELCOME = "welcome"  # Nothing searched yet
    SEARCHING = "searching"  # Lookup in flight
    RESULTS_SHOWN = "resultsShown"  # At least one entry to show
    EMPTY = "empty"  # Searched, nothing to show
