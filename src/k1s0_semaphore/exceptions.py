"""semaphore ライブラリの例外型定義"""

from __future__ import annotations


class SemaphoreError(Exception):
    """semaphore ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class SemaphoreErrorCodes:
    """SemaphoreError のエラーコード定数。"""

    INVALID_ARGUMENT: str = "INVALID_ARGUMENT"
    ACQUIRE_TIMEOUT: str = "ACQUIRE_TIMEOUT"
    EXCESS_RELEASE: str = "EXCESS_RELEASE"
    CANCELLED: str = "CANCELLED"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class InvalidArgumentError(SemaphoreError, ValueError):
    """Raised when a capacity or timeout argument is out of range."""

    def __init__(self, message: str) -> None:
        super().__init__(SemaphoreErrorCodes.INVALID_ARGUMENT, message)


class AcquireTimeoutError(SemaphoreError, TimeoutError):
    """Raised to a pending acquire whose timeout elapsed before a grant."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(SemaphoreErrorCodes.ACQUIRE_TIMEOUT, "Acquire timeout")


class ExcessReleaseError(SemaphoreError):
    """Raised when release is called with no outstanding permits."""

    def __init__(self) -> None:
        super().__init__(
            SemaphoreErrorCodes.EXCESS_RELEASE,
            "Semaphore released too many times: current count is 0",
        )


class SemaphoreCancelledError(SemaphoreError):
    """Raised to pending acquires when the semaphore is closed."""

    def __init__(self, message: str = "Semaphore closed") -> None:
        super().__init__(SemaphoreErrorCodes.CANCELLED, message)
