from orderdesk.core.constants import ORDER_STATUSES
from orderdesk.core.errors import ValidationFailure


def is_known_status(value) -> bool:
    return isinstance(value, str) and value in ORDER_STATUSES


def is_transition_allowed(current: str, new: str, *, forward_only: bool = False) -> bool:
    if not is_known_status(new):
        return False
    if not forward_only or not is_known_status(current):
        return True
    return ORDER_STATUSES.index(new) >= ORDER_STATUSES.index(current)


def check_status_transition(current: str, new: str, *, forward_only: bool = False) -> None:
    if not is_known_status(new):
        raise ValidationFailure(
            "Invalid status",
            details={"status": new, "allowed": list(ORDER_STATUSES)},
        )
    if not is_transition_allowed(current, new, forward_only=forward_only):
        raise ValidationFailure(
            "Order cannot move from '{}' back to '{}'.".format(current, new),
            details={"current": current, "status": new},
        )


__all__ = ["check_status_transition", "is_known_status", "is_transition_allowed"]
