"""Per-frame callback scheduling with cancel handles."""

from __future__ import annotations

import itertools
from typing import Any, Callable


class FrameScheduler:
    """Runs one-shot callbacks before the next repaint.

    ``request`` returns a handle that ``cancel`` accepts. A callback that wants
    to run every frame has to request itself again, so cancelling its latest
    handle stops the loop for good.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._callbacks: dict[int, Callable[..., Any]] = {}

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def request(self, callback: Callable[..., Any]) -> int:
        handle = next(self._ids)
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle: int | None) -> None:
        if handle is not None:
            self._callbacks.pop(handle, None)

    def run_pending(self, *args: Any) -> int:
        """Fire the callbacks queued before this call, in request order."""
        due = list(self._callbacks)
        fired = 0
        for handle in due:
            # An earlier callback in this batch may have cancelled it
            callback = self._callbacks.pop(handle, None)
            if callback is None:
                continue
            callback(*args)
            fired += 1
        return fired
