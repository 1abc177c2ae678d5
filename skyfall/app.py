"""
The event loop.

Four wait-arms: tick timer, frame timer, message channel, input poll.
Whichever finishes first gets serviced and re-armed; the others keep
waiting, so nothing they produce is dropped. Only this loop ever calls
update(), so the model is touched by one coroutine at a time.
"""
import asyncio
import logging
import random
import signal

from blessed import Terminal

from .channel import channel
from .config import Config
from .errors import ChannelClosed
from .input import InputPoller
from .messages import Command, Message, Quit, Render, Tick
from .model import Model
from .terminal import TerminalSession
from .timer import Interval
from .update import update
from .view import View

log = logging.getLogger(__name__)


class App:
    def __init__(self, config: Config = None, *, term=None, session=None, view=None, poller=None, rng=None):
        self.config = (config or Config()).validate()
        if term is None and None in (session, view, poller):
            term = Terminal()
        self.session = session or TerminalSession(term)
        self.view = view or View(term)
        self.poller = poller or InputPoller(term, self.config.poll_timeout)
        self.rng = rng or random.Random()
        self.model = Model()
        self.event_tx, self.event_rx = channel()
        self.processed = 0

    def update(self, message: Message) -> Command:
        self.processed += 1
        _, command = update(self.model, message, self.view, self.rng)
        return command

    async def run(self):
        with self.session:
            loop = asyncio.get_running_loop()
            self._watch_signals(loop)
            try:
                await self._loop()
            finally:
                self._unwatch_signals(loop)

    # --- signals ---

    def _on_sigterm(self):
        log.info("SIGTERM received, quitting")
        self.event_tx.send(Quit())

    def _watch_signals(self, loop):
        try:
            loop.add_signal_handler(signal.SIGTERM, self._on_sigterm)
        except (NotImplementedError, RuntimeError):
            log.debug("signal handlers unavailable on this loop")

    def _unwatch_signals(self, loop):
        try:
            loop.remove_signal_handler(signal.SIGTERM)
        except (NotImplementedError, RuntimeError):
            pass

    # --- main loop ---

    def _dispatch(self, source: str, result) -> Command:
        if source == 'tick':
            self.event_tx.send(Tick())
        elif source == 'frame':
            self.event_tx.send(Render())
        elif source == 'message':
            if result is None:
                raise ChannelClosed("message channel closed while the loop was running")
            log.debug("update %r", result)
            return self.update(result)
        elif source == 'input':
            for message in result:
                self.event_tx.send(message)
        return Command.NONE

    async def _loop(self):
        tick = Interval(self.config.tick_interval)
        frame = Interval(self.config.frame_interval)
        arms = {
            'tick': tick.tick,
            'frame': frame.tick,
            'message': self.event_rx.recv,
            'input': self.poller.poll,
        }
        pending = {asyncio.ensure_future(arm()): name for name, arm in arms.items()}
        log.info("loop started: tick_rate=%s frame_rate=%s", self.config.tick_rate, self.config.frame_rate)
        try:
            while True:
                done, _ = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                ready = list(done)
                self.rng.shuffle(ready)  # no priority between arms
                for task in ready:
                    name = pending.pop(task)
                    if self._dispatch(name, task.result()) is Command.QUIT:
                        log.info("quit after %d messages", self.processed)
                        return
                    pending[asyncio.ensure_future(arms[name]())] = name
        finally:
            await self._drain(pending)

    async def _drain(self, pending):
        # a blocking read can't be interrupted; let it finish before the terminal is restored
        reading = [t for t, name in pending.items() if name == 'input']
        for task, name in pending.items():
            if name != 'input': task.cancel()
        if reading:
            _, stuck = await asyncio.wait(reading, timeout=self.config.poll_timeout * 2)
            for task in stuck: task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
