from datetime import datetime

from rides.models import RideRequest, RequestStatus


class RequestStateException(Exception):
    """Raised when an invalid request transition is attempted."""
    pass


def transition_request_to_matched(request: RideRequest, driver_id: int, now: datetime) -> RideRequest:
    """
    PENDING -> MATCHED once a driver has been assigned.
    """
    if request.status != RequestStatus.PENDING:
        raise RequestStateException(f"Cannot match request {request.id} from {request.status}")

    request.status = RequestStatus.MATCHED
    request.driver_id = driver_id
    request.resolved_at = now
    return request


def transition_request_to_expired(request: RideRequest, now: datetime) -> RideRequest:
    """
    PENDING -> EXPIRED when the sweep finds the request past its timeout.
    The passenger's slot is gone; nothing re-submits it.
    """
    if request.status != RequestStatus.PENDING:
        raise RequestStateException(f"Cannot expire request {request.id} from {request.status}")

    request.status = RequestStatus.EXPIRED
    request.resolved_at = now
    return request
