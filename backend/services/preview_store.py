"""
Preview Store - The single reusable preview shared with the editor plugin

Every preview overwrites the same left/right pair instead of opening a new
comparison each time. Subscribers are notified on every change so an open
diff view can refresh itself.
"""

from __future__ import annotations

import asyncio
import logging

from models.patch import PreviewContents, PreviewEvent

logger = logging.getLogger(__name__)

# Pending events kept per subscriber; the oldest is dropped when full
SUBSCRIBER_QUEUE_SIZE = 16


class PreviewStore:
    """Hold the current preview contents and fan out change events"""

    _instance = None

    def __init__(self):
        self._left = ""
        self._right = ""
        self._version = 0
        self._subscribers: set[asyncio.Queue] = set()

    @classmethod
    def get_instance(cls) -> "PreviewStore":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = PreviewStore()
        return cls._instance

    def snapshot(self) -> PreviewContents:
        return PreviewContents(left=self._left, right=self._right, version=self._version)

    def set_contents(self, left: str | None, right: str | None) -> PreviewContents:
        """Replace both sides of the preview"""
        self._left = left or ""
        self._right = right or ""
        self._version += 1
        self._notify("changed")
        return self.snapshot()

    def reset(self) -> PreviewContents:
        """Clear the preview (the plugin's "Close Preview")"""
        self._left = ""
        self._right = ""
        self._version += 1
        self._notify("reset")
        return self.snapshot()

    def subscribe(self) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=SUBSCRIBER_QUEUE_SIZE)
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue):
        self._subscribers.discard(queue)

    def _notify(self, event_type: str):
        event = PreviewEvent(type=event_type, version=self._version)
        for queue in list(self._subscribers):
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(event)
        logger.debug(
            "[PreviewStore] %s v%d (%d subscribers)", event_type, self._version, len(self._subscribers)
        )
