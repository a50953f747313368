"""IPv4 socket addresses."""

import socket

_ANY = "0.0.0.0"


class Endpoint:
    """An IPv4 host and port; an empty host means any address."""

    __slots__ = ("_host", "_port")

    def __init__(self, port=0, host=""):
        self._port = port & 0xFFFF
        if not host:
            self._host = _ANY
            return
        try:
            packed = socket.inet_pton(socket.AF_INET, host)
        except OSError as exc:
            raise ValueError("Invalid network address") from exc
        self._host = socket.inet_ntop(socket.AF_INET, packed)

    @classmethod
    def from_address(cls, address):
        """Build an endpoint from a ``(host, port)`` pair."""
        host, port = address[0], address[1]
        return cls(port, host)

    @property
    def port(self):
        """The port number."""
        return self._port

    @property
    def hostname(self):
        """The address in dotted-quad form."""
        return self._host

    @property
    def address(self):
        """The ``(host, port)`` pair the socket module expects."""
        return (self._host, self._port)

    def __eq__(self, other):
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.address == other.address

    def __hash__(self):
        return hash(self.address)

    def __repr__(self):
        return f"Endpoint({self._port!r}, {self._host!r})"