# netshell

netshell is a small toolkit of building blocks for line-based network
programs and interactive command tools:

- `netshell.iocontext.IOContext`: an event loop on `select.poll()` that
  runs queued read and write handlers per file descriptor;
- `netshell.endpoint.Endpoint`: IPv4 host and port values;
- `netshell.radix.RadixTree`, `netshell.context.Context` and
  `netshell.messages`: a route table with path parameters and middleware
  chains for JSON requests and responses;
- `netshell.shell`: declarative command definitions with positional
  arguments, options and flags, plus an editable line buffer and key
  bindings;
- `netshell.strings`, `netshell.logger`, `netshell.factory` and
  `netshell.options`: string helpers, a coloured levelled logger, a keyed
  factory and argv option handling.

It needs only the standard library and runs on POSIX systems.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The event loop

`IOContext` watches registered descriptors (integers or objects with
`fileno()`). Handlers posted with `post_read` or `post_write` run in order,
at most one per descriptor per polling round.

```python
import socket

from netshell.iocontext import IOContext

left, right = socket.socketpair()
io = IOContext()
io.register(left)
io.post_read(left, lambda: print(left.recv(1024)))

right.send(b"hi")
io.poll()        # prints b'hi'
```

`poll()` runs one round, `poll_all()` runs rounds until nothing is ready, and
`run()` loops until `stop()` has been called and every queue is empty.
`poll()` and `poll_all()` raise `RuntimeError` while `run()` is active.
Descriptors that report a hang-up or error are dropped along with their
pending handlers.

## Endpoints

```python
from netshell.endpoint import Endpoint

Endpoint(4242, "127.0.0.1").address   # ('127.0.0.1', 4242)
Endpoint(80).hostname                 # '0.0.0.0'
Endpoint(80, "not-an-ip")             # raises ValueError
```

## Routing JSON requests

Routes are registered on a `RadixTree` as lists of path words. Words that
start with `:` capture a parameter. The last handler given is the route's
handler; any before it run first as middlewares for that method.

```python
from netshell.context import Context
from netshell.messages import Method, StatusCode
from netshell.radix import RadixTree
from netshell.strings import split


def auth(ctx):
    ctx.next()


def show_user(ctx):
    ctx.jsonp(StatusCode.STATUS_OK, {"id": ctx.params[":id"]})


tree = RadixTree()
tree.add(split("/users/:id", "/"), Method.GET, [auth, show_user])

ctx = Context({"method": Method.GET, "path": "/users/42", "body": None}, state={})
status = tree.handle(ctx)
if status is StatusCode.STATUS_OK:
    ctx.next()
else:
    ctx.abort_with_status(status)

ctx.response
# {'status_code': 200, 'status_message': 'Status OK', 'body': {'id': '42'}}
```

`handle` returns `StatusCode.NOT_FOUND` for unknown paths and
`StatusCode.METHOD_NOT_ALLOWED` for known paths without a handler for the
request's method. `Request` and `Response` convert to and from JSON-ready
mappings with `to_json()` and `from_json()`. `tree.print_paths()` lists
every route, sorted by path then method.

## Command definitions

```python
from netshell.shell.builders import CommandBuilder

greet = (
    CommandBuilder()
    .name("greet")
    .description("Say hello")
    .arg(lambda b: b.name("who").description("Who to greet").required())
    .option(lambda b: b.name("greeting").alias("g").default_value("Hello"))
    .flag(lambda b: b.name("loud").alias("l"))
    .action(
        lambda ctx: print(
            f"{ctx.option('greeting')}, {ctx.arg('who')}"
            + ("!" if ctx.flag("loud") else "")
        )
    )
    .build()
)

ctx = greet.build_context(["greet", "world", "-g", "Hi", "--loud"])
greet.handler(ctx)    # Hi, world!
```

`build_context` fills in defaults, then raises a subclass of
`netshell.shell.errors.ContextError` for a missing required argument,
option or flag, an option without a value, an unknown dashed token, or an
extra positional argument. `netshell.strings.split_quoted` turns a typed
line into tokens, keeping double-quoted text together.

## Line editing

```python
from netshell.shell.keys import KeyDispatcher
from netshell.shell.linebuffer import LineBuffer

buf = LineBuffer()
for char in "helo":
    buf.insert(char)

keys = KeyDispatcher()
keys.dispatch("\x1b[D", buf)    # left arrow
buf.insert("l")
buf.text                        # 'hello'
```

Backspace, Ctrl+H, the arrow keys, Home and End are bound by default;
`bind` adds or replaces a binding.

## What the package does not do

netshell does not open, connect or accept sockets itself, and nothing in it
listens on a port: `IOContext` only runs handlers for descriptors you create
with the `socket` module, and `RadixTree` resolves requests you hand it. It
installs no commands. It has no interactive prompt or command loop and does
not switch the terminal into raw mode: command definitions parse token lists
you supply, and `LineBuffer` with `KeyDispatcher` edit text you feed them key
by key.