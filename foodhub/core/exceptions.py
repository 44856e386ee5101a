"""Workflow errors raised by the order and application services.

Each error carries a ``status_code`` hint for whichever HTTP layer ends up
translating it.
"""
from typing import Iterable, Optional


class WorkflowError(Exception):
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFound(WorkflowError):
    status_code = 404

    def __init__(self, resource_name: str = "Resource", resource_id: Optional[int] = None):
        self.resource_name = resource_name
        self.resource_id = resource_id
        if resource_id is not None:
            message = f"{resource_name} with id {resource_id} not found"
        else:
            message = f"{resource_name} not found"
        super().__init__(message)


class InvalidTransition(WorkflowError):
    status_code = 400

    def __init__(self, current: str, target: str, allowed: Iterable[str] = ()):
        self.current = str(current)
        self.target = str(target)
        self.allowed = [str(status) for status in allowed]
        super().__init__(
            f"Transition from '{self.current}' to '{self.target}' is not allowed. "
            f"Possible next statuses: {self.allowed}"
        )


class OrderNotInDelivery(WorkflowError):
    status_code = 400

    def __init__(self, order_id: int, status: str):
        self.order_id = order_id
        self.status = str(status)
        super().__init__(
            f"Order {order_id} must be out for delivery to record a position (current: '{self.status}')"
        )


class OrderNotCancellable(WorkflowError):
    status_code = 400

    def __init__(self, order_id: int, status: str):
        self.order_id = order_id
        self.status = str(status)
        super().__init__("Order cannot be cancelled at this stage")


class AlreadyDecided(WorkflowError):
    status_code = 409

    def __init__(self, application_status: str, decision: str):
        self.application_status = str(application_status)
        self.decision = str(decision)
        super().__init__(
            f"Cannot {self.decision} an application that is already '{self.application_status}'"
        )


class UnsupportedDecision(WorkflowError):
    status_code = 400

    def __init__(self, kind: str, decision: str):
        self.kind = str(kind)
        self.decision = str(decision)
        super().__init__(f"Decision '{self.decision}' is not supported for {self.kind} applications")
