"""Request and response messages exchanged by the router, with JSON mapping."""

import enum
from dataclasses import dataclass
from typing import Any


class Method(enum.IntEnum):
    """Request methods understood by the router."""

    GET = 0
    POST = 1
    PUT = 2
    DELETE = 3

    def __str__(self):
        return self.name


class StatusCode(enum.IntEnum):
    """Status codes a response can carry."""

    STATUS_OK = 200
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405


STATUS_MESSAGES = {
    StatusCode.STATUS_OK: "Status OK",
    StatusCode.UNAUTHORIZED: "Unauthorised",
    StatusCode.NOT_FOUND: "Not Found",
    StatusCode.METHOD_NOT_ALLOWED: "Methode Not Allowed",
}


def _require_str(value, key):
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass
class Request:
    """A routed request: a method, a path and a JSON body."""

    method: Method
    path: str
    body: Any = None

    def __post_init__(self):
        self.method = Method(self.method)

    def to_json(self):
        """Return the JSON-compatible mapping of this request."""
        return {"method": int(self.method), "path": self.path, "body": self.body}

    @classmethod
    def from_json(cls, data):
        """Build a request from a decoded JSON object."""
        return cls(
            method=Method(data["method"]),
            path=_require_str(data["path"], "path"),
            body=data["body"],
        )


@dataclass
class Response:
    """A response: a status code, its message and a JSON body."""

    status_code: StatusCode = StatusCode.STATUS_OK
    status_message: str = ""
    body: Any = None

    def __post_init__(self):
        self.status_code = StatusCode(self.status_code)

    def to_json(self):
        """Return the JSON-compatible mapping of this response."""
        return {
            "status_code": int(self.status_code),
            "status_message": self.status_message,
            "body": self.body,
        }

    @classmethod
    def from_json(cls, data):
        """Build a response from a decoded JSON object."""
        return cls(
            status_code=StatusCode(data["status_code"]),
            status_message=_require_str(data["status_message"], "status_message"),
            body=data["body"],
        )