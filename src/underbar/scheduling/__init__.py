"""Deferred-callback schedulers used by ``delay``."""

from underbar.scheduling.scheduler import (
    Handle,
    ScheduledCall,
    Scheduler,
    SchedulerLike,
    TimerScheduler,
    VirtualScheduler,
    default_scheduler,
)

__all__ = [
    "Handle",
    "SchedulerLike",
    "Scheduler",
    "TimerScheduler",
    "ScheduledCall",
    "VirtualScheduler",
    "default_scheduler",
]
