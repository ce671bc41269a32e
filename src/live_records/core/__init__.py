"""Record list core."""

from .reconciler import RecordReconciler
from .session import WatchSession

__all__ = ["RecordReconciler", "WatchSession"]
