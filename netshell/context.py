"""Per-request state handed through a router's middleware chain."""

from netshell.messages import STATUS_MESSAGES, Request, Response, StatusCode


class Context:
    """One request being handled: its middlewares, handler, params and response.

    The chain starts with a placeholder step, so the first call to
    :meth:`next` runs the first real middleware; when the middlewares are
    exhausted the handler runs.
    """

    def __init__(self, request, state, socket=None):
        if isinstance(request, Request):
            self._request = request
        else:
            self._request = Request.from_json(request)
        self._response = Response()
        self._params = {}
        self._state = state
        self.socket = socket
        self._middlewares = [lambda context: context.next()]
        self._handler = None
        self._current = 0
        self._errors = []

    @property
    def path(self):
        """The request path."""
        return self._request.path

    def abort_with_status(self, code):
        """Set the response to ``code`` with its standard message and no body."""
        code = StatusCode(code)
        self._response = Response(code, STATUS_MESSAGES[code], None)

    def jsonp(self, code, body):
        """Set the response to ``code`` with its standard message and ``body``."""
        code = StatusCode(code)
        self._response = Response(code, STATUS_MESSAGES[code], body)

    @property
    def response(self):
        """The response as a JSON-compatible mapping."""
        return self._response.to_json()

    def add_middleware(self, middleware):
        """Append a middleware and restart the chain from the beginning."""
        self._middlewares.append(middleware)
        self._current = 0

    def add_middlewares(self, middlewares):
        """Append several middlewares and restart the chain from the beginning."""
        self._middlewares.extend(middlewares)
        self._current = 0

    def set_handler(self, handler):
        """Set the handler run once every middleware has passed."""
        self._handler = handler

    def add_params(self, params):
        """Record path parameters given as ``(name, value)`` pairs."""
        for key, value in params:
            self._params[key] = value

    @property
    def params(self):
        """The path parameters captured for this request."""
        return self._params

    def next(self):
        """Run the next middleware, or the handler when none is left."""
        self._current += 1
        if self._current < len(self._middlewares):
            self._middlewares[self._current](self)
            return
        if self._handler is None:
            raise RuntimeError("no handler set for this context")
        self._handler(self)

    def has_handlers(self):
        """Return True while no handler has been set."""
        return self._handler is None

    @property
    def request(self):
        """The request being handled."""
        return self._request

    def error(self, err):
        """Record an error raised while handling the request."""
        self._errors.append(err)

    @property
    def errors(self):
        """The errors recorded so far."""
        return list(self._errors)

    @property
    def client_state(self):
        """The state object of the client that sent the request."""
        return self._state