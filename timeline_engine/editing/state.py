"""
State definitions for the edit session.

The session is always in exactly one of two states:

- IdleState: no edit in progress; mutations are rejected as no-ops.
- EditingState: holds the pristine snapshot, the working copy and the
  batch-replace selection.

Keeping the plan copies inside EditingState means a working copy can never
exist outside an edit.
"""

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Union

from ..schemas.plan import Plan


@dataclass(frozen=True)
class IdleState:
    """No edit in progress."""
    status: Literal["idle"] = "idle"


@dataclass
class EditingState:
    """An edit in progress."""
    original: Plan
    working: Plan
    selected: List[str] = field(default_factory=list)
    status: Literal["editing"] = "editing"


SessionState = Union[IdleState, EditingState]

IDLE = IdleState()


EditAction = Literal["delete", "reorder", "replace"]


@dataclass(frozen=True)
class EditResult:
    """
    Outcome of one edit operation.

    ``changed`` is False when the operation was a no-op: the session was idle,
    the day or stop could not be found, or the index was out of range.
    ``times_recomputed`` is False when the edit went through but the day's
    first stop had no start time to reflow from.
    """
    action: EditAction
    day: str
    changed: bool
    name: Optional[str] = None
    replacement_name: Optional[str] = None
    times_recomputed: bool = False
    reason: Optional[str] = None

    @classmethod
    def noop(cls, action: EditAction, day: str, reason: str, name: Optional[str] = None) -> "EditResult":
        return cls(action=action, day=day, changed=False, name=name, reason=reason)
