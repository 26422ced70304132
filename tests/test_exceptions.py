"""例外型のユニットテスト"""

from k1s0_semaphore import (
    AcquireTimeoutError,
    ExcessReleaseError,
    InvalidArgumentError,
    SemaphoreCancelledError,
    SemaphoreError,
    SemaphoreErrorCodes,
)


def test_semaphore_error_str_includes_code() -> None:
    """str() が "code: message" 形式になること。"""
    err = SemaphoreError(code="SOME_CODE", message="something failed")
    assert str(err) == "SOME_CODE: something failed"
    assert err.code == "SOME_CODE"
    assert err.message == "something failed"


def test_semaphore_error_cause() -> None:
    """cause が __cause__ に設定されること。"""
    cause = OSError("disk")
    err = SemaphoreError(code=SemaphoreErrorCodes.READ_FILE, message="read", cause=cause)
    assert err.__cause__ is cause


def test_subclass_codes() -> None:
    """各サブクラスが対応するエラーコードを持つこと。"""
    assert InvalidArgumentError("bad").code == SemaphoreErrorCodes.INVALID_ARGUMENT
    assert AcquireTimeoutError(1.0).code == SemaphoreErrorCodes.ACQUIRE_TIMEOUT
    assert ExcessReleaseError().code == SemaphoreErrorCodes.EXCESS_RELEASE
    assert SemaphoreCancelledError().code == SemaphoreErrorCodes.CANCELLED


def test_subclass_hierarchy() -> None:
    """標準例外としても捕捉できること。"""
    assert isinstance(InvalidArgumentError("bad"), ValueError)
    assert isinstance(AcquireTimeoutError(0.5), TimeoutError)
    for err in (
        InvalidArgumentError("bad"),
        AcquireTimeoutError(0.5),
        ExcessReleaseError(),
        SemaphoreCancelledError(),
    ):
        assert isinstance(err, SemaphoreError)


def test_acquire_timeout_error_fields() -> None:
    err = AcquireTimeoutError(0.25)
    assert err.timeout == 0.25
    assert str(err) == "ACQUIRE_TIMEOUT: Acquire timeout"


def test_excess_release_message() -> None:
    assert str(ExcessReleaseError()) == (
        "EXCESS_RELEASE: Semaphore released too many times: current count is 0"
    )
