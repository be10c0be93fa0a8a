import enum
import threading


class RunState(str, enum.Enum):
    IDLE = "IDLE"
    RUNNING_FULL = "RUNNING_FULL"


class RunGuard:
    """Single-flight state cell with compare-and-set semantics.

    The internal lock only protects the swap itself and is never held while a
    run executes, so a losing caller returns immediately.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._state = RunState.IDLE

    @property
    def state(self) -> RunState:
        return self._state

    def compare_and_set(self, expected: RunState, new: RunState) -> bool:
        with self._lock:
            if self._state is not expected:
                return False
            self._state = new
            return True

    def try_acquire(self) -> bool:
        return self.compare_and_set(RunState.IDLE, RunState.RUNNING_FULL)

    def release(self) -> None:
        with self._lock:
            self._state = RunState.IDLE
