"""
Edit session for a multi-day plan.

Lifecycle:
    session = EditSession()
    session.enter(plan)                       # Idle -> Editing

    session.delete_stop("day1", 2)
    session.reorder("day1", 0, 3)
    session.toggle_select("성수연방")
    request = session.build_alternatives_request("day1")
    # ... caller fetches candidates with `request` ...
    session.replace_stop("day1", "성수연방", candidates[0])

    new_plan = session.commit()               # Editing -> Idle
    # or session.discard() / session.reset_to_original()

Every mutation works on the working copy only, keeps the day's location
lists and min_transfer_version in step with fastest_version, and reflows the
day's display windows. Mutations report through EditResult instead of
raising, so a stale index or name after an earlier edit is simply a no-op.
"""

from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from ..schemas.plan import DayPlan, Plan, Stop
from ..schemas.requests import AlternativesRequest, Candidate
from ..tools.schedule import find_anchor_minutes, recompute_times
from ..tools.time_window import format_window
from ..utils.exceptions import SessionStateError, ValidationError
from ..utils.logger import get_logger
from .state import IDLE, EditingState, EditResult, SessionState

logger = get_logger(__name__, component="edit_session")


class EditSession:
    """
    Holds one plan edit from enter() to commit() or discard().

    Single-threaded: callers must not run two mutations at once, e.g. the UI
    stays disabled while an alternatives fetch is outstanding.
    """

    def __init__(self) -> None:
        self.state: SessionState = IDLE

    # ── State ────────────────────────────────────────────────────────────────

    @property
    def is_editing(self) -> bool:
        return isinstance(self.state, EditingState)

    @property
    def working(self) -> Optional[Plan]:
        """The mutable working copy, or None when idle."""
        return self.state.working if isinstance(self.state, EditingState) else None

    @property
    def original(self) -> Optional[Plan]:
        """The snapshot taken at enter(), or None when idle."""
        return self.state.original if isinstance(self.state, EditingState) else None

    @property
    def selected(self) -> Tuple[str, ...]:
        """Stops marked for batch replacement, in the order they were picked."""
        return tuple(self.state.selected) if isinstance(self.state, EditingState) else ()

    # ── Lifecycle ────────────────────────────────────────────────────────────

    def enter(self, plan: Union[Plan, Dict[str, Any], None]) -> bool:
        """
        Start editing a deep copy of ``plan``.

        Args:
            plan: Canonical plan, as a Plan or backend JSON dict

        Returns:
            True if the session is now editing, False if ``plan`` was absent
        """
        if plan is None:
            logger.debug("edit_enter_skipped", reason="no_plan")
            return False
        if isinstance(plan, dict):
            plan = Plan.from_dict(plan)

        if self.is_editing:
            logger.warning("edit_session_replaced", plan_id=self.state.working.plan_id)

        original = plan.model_copy(deep=True)
        self.state = EditingState(original=original, working=original.model_copy(deep=True))
        logger.info("edit_session_started", plan_id=plan.plan_id, days=len(plan.variants))
        return True

    def commit(self) -> Optional[Plan]:
        """End the session and hand back the working copy as the new canonical plan."""
        if not isinstance(self.state, EditingState):
            logger.debug("edit_commit_skipped", reason="idle")
            return None
        working = self.state.working
        self.state = IDLE
        logger.info("edit_session_committed", plan_id=working.plan_id)
        return working

    def discard(self) -> None:
        """End the session without changes. Safe to call in any state."""
        if isinstance(self.state, EditingState):
            logger.info("edit_session_discarded", plan_id=self.state.original.plan_id)
        self.state = IDLE

    def reset_to_original(self) -> bool:
        """Throw away all edits so far and keep editing a fresh copy of the snapshot."""
        if not isinstance(self.state, EditingState):
            return False
        self.state.working = self.state.original.model_copy(deep=True)
        logger.info("edit_session_reset", plan_id=self.state.original.plan_id)
        return True

    # ── Mutations ────────────────────────────────────────────────────────────

    def delete_stop(self, day: str, index: int) -> EditResult:
        """
        Remove the stop at ``index`` from the day.

        The stop's name is also dropped from min_transfer_version and from
        every location list and from the selection, then the day's windows are
        reflowed. Deleting the first stop keeps the day's start time.
        """
        day_plan, reason = self._editable_day(day)
        if day_plan is None:
            return EditResult.noop("delete", day, reason)

        timeline = day_plan.timelines.fastest_version
        if not 0 <= index < len(timeline):
            logger.info("stop_delete_skipped", day=day, index=index, size=len(timeline))
            return EditResult.noop("delete", day, "index_out_of_range")

        removed = timeline[index]
        remaining = timeline[:index] + timeline[index + 1:]
        if index == 0:
            remaining = _pin_day_start(remaining, find_anchor_minutes(timeline))
        day_plan.timelines.fastest_version = remaining
        day_plan.timelines.min_transfer_version = [
            stop for stop in day_plan.timelines.min_transfer_version if stop.name != removed.name
        ]
        removed_locations = day_plan.remove_location(removed.name)
        if removed.name in self.state.selected:
            self.state.selected.remove(removed.name)

        recomputed = self._recompute(day, day_plan)
        logger.info(
            "stop_deleted",
            day=day,
            index=index,
            name=removed.name,
            locations_removed=removed_locations,
            times_recomputed=recomputed,
        )
        return EditResult(
            action="delete", day=day, changed=True, name=removed.name, times_recomputed=recomputed
        )

    def reorder(self, day: str, from_index: int, to_index: int) -> EditResult:
        """
        Move the stop at ``from_index`` so it ends up at ``to_index``.

        Stops in between shift by one. ``route`` is re-sorted to the new
        order and windows are reflowed; the day keeps its start time even
        when a different stop becomes first.
        """
        day_plan, reason = self._editable_day(day)
        if day_plan is None:
            return EditResult.noop("reorder", day, reason)

        timeline = list(day_plan.timelines.fastest_version)
        size = len(timeline)
        if not (0 <= from_index < size and 0 <= to_index < size):
            logger.info("stop_reorder_skipped", day=day, from_index=from_index, to_index=to_index, size=size)
            return EditResult.noop("reorder", day, "index_out_of_range")
        if from_index == to_index:
            return EditResult.noop("reorder", day, "same_position", name=timeline[from_index].name)

        day_start = find_anchor_minutes(timeline)
        moved = timeline.pop(from_index)
        timeline.insert(to_index, moved)
        if timeline[0] is not day_plan.timelines.fastest_version[0]:
            timeline = _pin_day_start(timeline, day_start)
        day_plan.timelines.fastest_version = timeline

        order = {stop.name: position for position, stop in enumerate(timeline)}
        day_plan.route.sort(key=lambda record: order.get(record.name, -1))

        recomputed = self._recompute(day, day_plan)
        logger.info(
            "stop_reordered",
            day=day,
            name=moved.name,
            from_index=from_index,
            to_index=to_index,
            times_recomputed=recomputed,
        )
        return EditResult(
            action="reorder", day=day, changed=True, name=moved.name, times_recomputed=recomputed
        )

    def move_stop(self, day: str, index: int, direction: Literal["up", "down"]) -> EditResult:
        """Swap a stop with its neighbour above or below."""
        target = index - 1 if direction == "up" else index + 1
        return self.reorder(day, index, target)

    def replace_stop(
        self,
        day: str,
        old_name: str,
        alternative: Union[Candidate, Dict[str, Any]],
    ) -> EditResult:
        """
        Swap the stop named ``old_name`` for a backend-suggested alternative.

        The timeline stop keeps its position, transit and window and takes
        the alternative's name and category. Location records are replaced
        with the alternative's coordinates and categories. ``old_name`` is
        removed from the selection.
        """
        day_plan, reason = self._editable_day(day)
        if day_plan is None:
            return EditResult.noop("replace", day, reason, name=old_name)
        if isinstance(alternative, dict):
            alternative = Candidate.model_validate(alternative)

        timeline = day_plan.timelines.fastest_version
        index = next((i for i, stop in enumerate(timeline) if stop.name == old_name), None)
        if index is None:
            logger.info("stop_replace_skipped", day=day, name=old_name, reason="not_found")
            return EditResult.noop("replace", day, "stop_not_found", name=old_name)
        if alternative.name != old_name and any(stop.name == alternative.name for stop in timeline):
            logger.warning("stop_replace_skipped", day=day, name=old_name, replacement=alternative.name, reason="duplicate_name")
            return EditResult.noop("replace", day, "duplicate_name", name=old_name)

        renamed = {"name": alternative.name, "category": alternative.category}
        timeline[index] = timeline[index].model_copy(update=renamed)
        day_plan.timelines.min_transfer_version = [
            stop.model_copy(update=renamed) if stop.name == old_name else stop
            for stop in day_plan.timelines.min_transfer_version
        ]
        updated_kinds = day_plan.replace_location(old_name, alternative.to_location())

        recomputed = self._recompute(day, day_plan)
        if old_name in self.state.selected:
            self.state.selected.remove(old_name)

        logger.info(
            "stop_replaced",
            day=day,
            name=old_name,
            replacement=alternative.name,
            location_kinds=updated_kinds,
            times_recomputed=recomputed,
        )
        return EditResult(
            action="replace",
            day=day,
            changed=True,
            name=old_name,
            replacement_name=alternative.name,
            times_recomputed=recomputed,
        )

    # ── Batch-replace selection ──────────────────────────────────────────────

    def toggle_select(self, name: str) -> bool:
        """
        Flip a stop in or out of the batch-replace selection.

        Returns:
            True if the stop is selected afterwards
        """
        if not isinstance(self.state, EditingState):
            return False
        selected = self.state.selected
        if name in selected:
            selected.remove(name)
            return False
        selected.append(name)
        return True

    def clear_select(self) -> None:
        if isinstance(self.state, EditingState):
            self.state.selected.clear()

    def build_alternatives_request(self, day: str) -> AlternativesRequest:
        """
        Payload for the caller's alternatives fetch.

        Only selected stops that are on ``day`` go into the request.

        Raises:
            SessionStateError: If no edit is in progress
            ValidationError: If no selected stop is on the day or the day does not exist
        """
        if not isinstance(self.state, EditingState):
            raise SessionStateError("Alternatives can only be requested while editing")

        working = self.state.working
        day_plan = working.day(day)
        on_day = set() if day_plan is None else {stop.name for stop in day_plan.timelines.fastest_version}
        spot_names = [name for name in self.state.selected if name in on_day]

        errors = []
        if not spot_names:
            errors.append("Select at least one stop to replace")
        if day_plan is None:
            errors.append(f"Unknown day: {day}")
        if errors:
            logger.warning("alternatives_request_invalid", day=day, errors=errors)
            raise ValidationError(errors[0], validation_errors=errors, context={"day": day})

        return AlternativesRequest(
            plan_id=working.plan_id,
            day=day,
            spot_names=spot_names,
            region=working.summary.region or None,
        )

    # ── Internals ────────────────────────────────────────────────────────────

    def _editable_day(self, day: str) -> Tuple[Optional[DayPlan], Optional[str]]:
        if not isinstance(self.state, EditingState):
            logger.debug("edit_rejected", day=day, reason="idle")
            return None, "not_editing"
        day_plan = self.state.working.day(day)
        if day_plan is None:
            logger.info("edit_rejected", day=day, reason="unknown_day")
            return None, "unknown_day"
        return day_plan, None

    def _recompute(self, day: str, day_plan: DayPlan) -> bool:
        timeline = day_plan.timelines.fastest_version
        if timeline and find_anchor_minutes(timeline) is None:
            logger.warning("times_not_recomputed", day=day, first_stop=timeline[0].name, reason="missing_anchor")
            return False
        day_plan.timelines.fastest_version = recompute_times(timeline)
        return True


def _pin_day_start(timeline: List[Stop], day_start: Optional[int]) -> List[Stop]:
    """Give a new first stop the day's start time so the reflow keeps it."""
    if not timeline or day_start is None:
        return timeline
    first = timeline[0].model_copy(update={"time": format_window(day_start, day_start)})
    return [first] + timeline[1:]
