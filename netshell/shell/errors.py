"""Errors raised while parsing commands and leaving the shell."""

from netshell.strings import RED, RESET


def _format(text, value):
    return f"{RED}Error: {RESET}{text} {RED}{value}{RESET}"


class ContextError(Exception):
    """A command line did not match its command's definition."""

    def __init__(self, message=""):
        self.message = message
        super().__init__(message)


class MissingArgumentError(ContextError):
    """A required positional argument was not given."""

    def __init__(self, name):
        self.name = name
        super().__init__(_format("Missing required argument", name))


class MissingOptionError(ContextError):
    """A required option was not given."""

    def __init__(self, name):
        self.name = name
        super().__init__(_format("Missing required option", name))


class MissingFlagError(ContextError):
    """A required flag was not given."""

    def __init__(self, name):
        self.name = name
        super().__init__(_format("Missing required flag", name))


class MissingOptionValueError(ContextError):
    """An option was given without its value."""

    def __init__(self, name):
        self.name = name
        super().__init__(_format("Missing argument for option", name))


class UnknownTokenError(ContextError):
    """A dashed token matched no option or flag."""

    def __init__(self, token):
        self.token = token
        super().__init__(_format("Unknown option or flag", token))


class UnexpectedArgumentError(ContextError):
    """More positional arguments were given than the command accepts."""

    def __init__(self, token):
        self.token = token
        super().__init__(_format("Unexpected argument", token))


class ShellExit(Exception):
    """Raised to leave the shell's loop."""