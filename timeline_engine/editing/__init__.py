"""
Plan editing: the edit session and its states.
"""
from .state import IDLE, IdleState, EditingState, EditResult, SessionState
from .session import EditSession

__all__ = [
    "EditSession",
    "EditResult",
    "IdleState",
    "EditingState",
    "SessionState",
    "IDLE",
]
