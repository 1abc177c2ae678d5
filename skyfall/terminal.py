import contextlib
import logging

from .errors import TerminalError

log = logging.getLogger(__name__)


class TerminalSession:
    """
    Fullscreen + cbreak + hidden cursor + mouse reporting, entered once and
    left exactly once no matter how the run ends.

        with TerminalSession(term):
            ...
    """

    def __init__(self, term):
        self.term = term
        self._stack = None

    @property
    def active(self) -> bool:
        return self._stack is not None

    def enter(self):
        if self.active: return
        stack = contextlib.ExitStack()
        try:
            stack.enter_context(self.term.fullscreen())
            stack.enter_context(self.term.cbreak())
            stack.enter_context(self.term.hidden_cursor())
            stack.enter_context(self.term.mouse_enabled(report_motion=True))
        except Exception as e:
            stack.close()
            raise TerminalError(f"Failed to enter terminal mode: {e}") from e
        self._stack = stack
        log.info("terminal entered (%sx%s)", self.term.width, self.term.height)

    def exit(self):
        if not self.active: return
        stack, self._stack = self._stack, None
        try:
            stack.close()
        except Exception as e:
            raise TerminalError(f"Failed to end terminal mode: {e}") from e
        print(self.term.normal, end='', flush=True)
        log.info("Terminal exited.")

    def __enter__(self):
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            self.exit()
        except TerminalError:
            if exc is None:
                raise
            # keep the error that ended the run; the release failure only gets logged
            log.exception("terminal release failed while unwinding from %r", exc)
        return False
