import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class AsynchronousTask(Generic[T]):
    """
    비동기 작업 추적기와 연동하기 위한 결과 핸들입니다.

    서비스 자체는 동기적으로 동작하며, 호출이 끝난 뒤 호출자가 이 핸들을
    폴링하거나 `wait()`로 결과를 기다릴 수 있습니다.
    """

    def __init__(self):
        self._done = threading.Event()
        self._lock = threading.Lock()
        self._result: Optional[T] = None
        self._error: Optional[BaseException] = None

    def complete_with_result(self, result: T):
        with self._lock:
            if self._done.is_set():
                raise RuntimeError("Task has already completed.")
            self._result = result
            self._done.set()

    def complete_with_error(self, error: BaseException):
        with self._lock:
            if self._done.is_set():
                raise RuntimeError("Task has already completed.")
            self._error = error
            self._done.set()

    @property
    def is_complete(self) -> bool:
        return self._done.is_set()

    @property
    def result(self) -> Optional[T]:
        return self._result

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    def wait(self, timeout: Optional[float] = None) -> bool:
        """작업이 끝날 때까지 기다립니다. 시간 안에 끝났으면 True."""
        return self._done.wait(timeout)
