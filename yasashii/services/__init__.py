from .conversation_service import APOLOGY_TEXT, ConversationService
from .lookup_service import ERROR_READING, LookupService, error_entry, is_error_entry
from .session_controller import SessionController, SessionState
from .session_registry import SessionRegistry

__all__ = [
    "APOLOGY_TEXT",
    "ConversationService",
    "ERROR_READING",
    "LookupService",
    "error_entry",
    "is_error_entry",
    "SessionController",
    "SessionState",
    "SessionRegistry",
]
