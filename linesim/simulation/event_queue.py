# linesim/simulation/event_queue.py

import heapq
import itertools
from typing import List, Optional, Tuple

from linesim.errors import EmptyQueue
from linesim.models.event import Event


class EventQueue:
    """Min-priority queue of events keyed on time; equal times pop in insertion order."""

    def __init__(self):
        self._queue: List[Tuple[int, int, Event]] = []
        self._counter = itertools.count()  # tie-breaker for heapq

    def push(self, event: Event):
        heapq.heappush(self._queue, (event.time, next(self._counter), event))

    def pop(self) -> Event:
        if not self._queue:
            raise EmptyQueue("pop from an empty event queue")
        return heapq.heappop(self._queue)[2]

    def peek(self) -> Optional[Event]:
        return self._queue[0][2] if self._queue else None

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)
