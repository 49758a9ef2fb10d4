"""Status transition rules for incidents"""

from ..constants.enums import IncidentStatus
from ..exceptions import InvalidStateTransitionError

TERMINAL_STATUSES = frozenset({IncidentStatus.FALSE_POSITIVE.value})


def ensure_transition_allowed(current: str, target: str) -> None:
    """
    Any non-terminal status may move to any status; false_positive is final.

    Raises:
        InvalidStateTransitionError: When the incident is in a terminal status
    """
    if current in TERMINAL_STATUSES:
        raise InvalidStateTransitionError(
            f"Incident marked as {current} cannot be moved to {target}"
        )
