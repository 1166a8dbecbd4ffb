from typing import Any, Optional


class OrderDeskError(Exception):
    status_code = 500
    kind = "error"

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        payload = {"error": self.message, "kind": self.kind}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class NotFoundError(OrderDeskError):
    status_code = 404
    kind = "not_found"


class ValidationFailure(OrderDeskError):
    status_code = 400
    kind = "validation_failure"


class ReferentialConflict(OrderDeskError):
    status_code = 400
    kind = "referential_conflict"


class CollaboratorFailure(OrderDeskError):
    status_code = 500
    kind = "collaborator_failure"


__all__ = [
    "CollaboratorFailure",
    "NotFoundError",
    "OrderDeskError",
    "ReferentialConflict",
    "ValidationFailure",
]
