"""
Unbounded multi-producer, single-consumer message channel.

    tx, rx = channel()
    tx.send(Tick())
    msg = await rx.recv()

Senders must live on the event loop's thread (asyncio.Queue is not
thread-safe); anything produced off-loop is handed back through an
awaited future first, which is what the input poller does.
"""
import asyncio
from typing import Optional, Tuple

from .errors import ChannelClosed
from .messages import Message

_CLOSED = object()


class _Shared:
    def __init__(self):
        self.queue: asyncio.Queue = asyncio.Queue()
        self.senders = 0
        self.receiver_closed = False


class Sender:
    def __init__(self, shared: _Shared):
        self._shared = shared
        self._closed = False
        shared.senders += 1

    def send(self, message: Message):
        if self._closed:
            raise ChannelClosed("send on a closed sender")
        if self._shared.receiver_closed:
            raise ChannelClosed(f"receiver dropped, cannot deliver {message!r}")
        self._shared.queue.put_nowait(message)

    def clone(self) -> 'Sender':
        if self._closed:
            raise ChannelClosed("cannot clone a closed sender")
        return Sender(self._shared)

    def close(self):
        if self._closed: return
        self._closed = True
        self._shared.senders -= 1
        if self._shared.senders == 0:
            # wakes a pending recv() once everything before it is drained
            self._shared.queue.put_nowait(_CLOSED)

    @property
    def closed(self) -> bool:
        return self._closed or self._shared.receiver_closed


class Receiver:
    def __init__(self, shared: _Shared):
        self._shared = shared

    async def recv(self) -> Optional[Message]:
        """Wait for the next message. Returns None once every sender is gone."""
        if self._shared.receiver_closed:
            raise ChannelClosed("recv on a closed receiver")
        item = await self._shared.queue.get()
        if item is _CLOSED:
            self._shared.queue.put_nowait(_CLOSED)
            return None
        return item

    def close(self):
        self._shared.receiver_closed = True

    def __len__(self):
        n = self._shared.queue.qsize()
        return n - 1 if self._shared.senders == 0 and n else n


def channel() -> Tuple[Sender, Receiver]:
    shared = _Shared()
    return Sender(shared), Receiver(shared)
