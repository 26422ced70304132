"""k1s0 semaphore library."""

from .exceptions import (
    AcquireTimeoutError,
    ExcessReleaseError,
    InvalidArgumentError,
    SemaphoreCancelledError,
    SemaphoreError,
    SemaphoreErrorCodes,
)
from .loader import load_config
from .models import DEFAULT_CAPACITY, SemaphoreConfig
from .semaphore import Semaphore

__all__ = [
    "DEFAULT_CAPACITY",
    "Semaphore",
    "SemaphoreConfig",
    "load_config",
    "SemaphoreError",
    "SemaphoreErrorCodes",
    "InvalidArgumentError",
    "AcquireTimeoutError",
    "ExcessReleaseError",
    "SemaphoreCancelledError",
]
