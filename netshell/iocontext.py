"""A poll-based event loop that runs queued read and write handlers."""

import collections
import enum
import select

from netshell.strings import RED, RESET

_READY = select.POLLIN | select.POLLOUT
_FAILED = select.POLLHUP | select.POLLERR | select.POLLNVAL


class _OpType(enum.Enum):
    READ = enum.auto()
    WRITE = enum.auto()


def _fileno(fd):
    return fd if isinstance(fd, int) else fd.fileno()


class IOContext:
    """Queue handlers per descriptor and run them when it becomes ready.

    Each descriptor runs at most one handler per polling round, in the order
    the handlers were posted.
    """

    def __init__(self):
        self._events = {}
        self._pending = {}
        self._poller = select.poll()
        self._stop = False
        self._running = False

    def register(self, fd):
        """Start watching a descriptor (or object with ``fileno``)."""
        fd = _fileno(fd)
        self._events[fd] = select.POLLIN
        self._poller.register(fd, select.POLLIN)

    def unregister(self, fd):
        """Stop watching a descriptor and drop its pending handlers."""
        fd = _fileno(fd)
        self._pending.pop(fd, None)
        if fd in self._events:
            del self._events[fd]
            self._poller.unregister(fd)

    def post_read(self, fd, handler):
        """Queue ``handler`` to run when ``fd`` is readable."""
        self._post(_fileno(fd), _OpType.READ, handler)

    def post_write(self, fd, handler):
        """Queue ``handler`` to run when ``fd`` is writable."""
        self._post(_fileno(fd), _OpType.WRITE, handler)

    def run(self):
        """Poll until stopped and every queued handler has run."""
        self._running = True
        try:
            while True:
                self._handle_ready(self._poll_once(10))
                if self._stop and not any(self._pending.values()):
                    break
        finally:
            self._running = False

    def stop(self):
        """Ask ``run`` to return once the queues are empty."""
        self._stop = True

    def poll(self):
        """Run one polling round, waiting briefly for readiness."""
        self._ensure_idle()
        self._handle_ready(self._poll_once(10))

    def poll_all(self):
        """Run polling rounds until no descriptor is ready."""
        self._ensure_idle()
        while True:
            ready = self._poll_once(0)
            if not ready:
                break
            self._handle_ready(ready)

    def _ensure_idle(self):
        if self._running:
            raise RuntimeError(
                f"{RED}Error: {RESET}The IOContext loop is already running"
            )

    def _post(self, fd, op_type, handler):
        self._pending.setdefault(fd, collections.deque()).append((op_type, handler))
        self._update_event_type(fd)

    def _poll_once(self, timeout):
        try:
            return dict(self._poller.poll(timeout))
        except OSError as exc:
            raise RuntimeError(f"{RED}Error: {RESET}{exc.strerror}") from exc

    def _update_event_type(self, fd):
        queue = self._pending.get(fd)
        if not queue or fd not in self._events:
            return
        mask = select.POLLIN if queue[0][0] is _OpType.READ else select.POLLOUT
        self._events[fd] = mask
        self._poller.modify(fd, mask)

    def _handle_ready(self, revents_by_fd):
        for fd in list(self._events):
            if fd not in self._events:
                continue
            revents = revents_by_fd.get(fd, 0)
            if revents & _FAILED:
                self.unregister(fd)
                continue
            self._trigger(fd, revents)
            if self._stop and not self._events:
                break

    def _trigger(self, fd, revents):
        queue = self._pending.get(fd)
        if not revents & _READY or not queue:
            return
        _, handler = queue.popleft()
        handler()
        self._update_event_type(fd)