import threading
from dataclasses import dataclass, replace
from typing import Callable, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class AppState:

    tick_count: int = 0


class GlobalState:
    """Holds the application state shared by every request handler.

    Reads never block. Writers serialize on a single lock, so each
    `update()` is an atomic read-modify-write from the point of view of
    every other caller, be it a coroutine or a worker thread.
    """

    _state: AppState
    _lock: threading.Lock

    def __init__(self, state: AppState = AppState()):
        self._state = state
        self._lock = threading.Lock()

    def get(self) -> AppState:
        return self._state

    def gets(self, f: Callable[[AppState], T]) -> T:
        return f(self._state)

    def update(self, f: Callable[[AppState], AppState]) -> AppState:
        # `f` runs while holding the lock; it must not block or have
        # side effects.
        with self._lock:
            self._state = f(self._state)
            return self._state

    def modify_tick_count(self, f: Callable[[int], int]) -> int:
        st = self.update(lambda st: replace(st, tick_count=f(st.tick_count)))
        return st.tick_count

    def inc(self, n: int = 1) -> int:
        return self.modify_tick_count(lambda c: c + n)

    @property
    def counter(self) -> int:
        return self._state.tick_count
