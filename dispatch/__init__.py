#Expose the high-level pipeline pieces:
#Dispatcher (the "one object" entry point owning drivers, requests and the index)
#Policy (tunable thresholds)
#Reported conditions (not found errors)
#Statistics rendering for the presentation layer

from .dispatcher import Dispatcher, MatchResult, PendingRequestView, DispatchStats
from .exceptions import DispatchError, DriverNotFound, RequestNotFound
from .policy import DispatchPolicy, default_dispatch_policy, policy_from_env
from .reporting import format_last_active, format_wait_time, render_stats

__all__ = [
    "Dispatcher",
    "MatchResult",
    "PendingRequestView",
    "DispatchStats",
    "DispatchError",
    "DriverNotFound",
    "RequestNotFound",
    "DispatchPolicy",
    "default_dispatch_policy",
    "policy_from_env",
    "format_last_active",
    "format_wait_time",
    "render_stats",
]
