from __future__ import annotations
import heapq
import threading
from typing import Any, List, Optional, Tuple

class PriorityQueue:
    def __init__(self) -> None:
        self._h: List[Tuple[Any, int, Any]] = []
        self._tiebreak = 0

    def push(self, priority: Any, item: Any) -> None:
        self._tiebreak += 1
        heapq.heappush(self._h, (priority, self._tiebreak, item))

    def pop(self) -> Any:
        return heapq.heappop(self._h)[2]

    def __len__(self) -> int:
        return len(self._h)


class ConcurrentPriorityQueue:
    """PriorityQueue shared between producer threads and one consumer.

    Producers announce themselves with task_started()/task_done() so that
    pop() can tell "empty for now" (someone is still producing: wait) from
    "empty for good" (nobody is: return None).
    """
    def __init__(self) -> None:
        self._q = PriorityQueue()
        self._cond = threading.Condition()
        self._pending = 0

    def push(self, priority: Any, item: Any) -> None:
        with self._cond:
            self._q.push(priority, item)
            self._cond.notify()

    def task_started(self) -> None:
        with self._cond:
            self._pending += 1

    def task_done(self) -> None:
        with self._cond:
            self._pending -= 1
            self._cond.notify_all()

    def pop(self, timeout: Optional[float] = None) -> Optional[Any]:
        """Best item, or None once the queue is empty with no task pending (or on timeout)."""
        with self._cond:
            while len(self._q) == 0:
                if self._pending == 0:
                    return None
                if not self._cond.wait(timeout):
                    return None
            return self._q.pop()

    def __len__(self) -> int:
        with self._cond:
            return len(self._q)
