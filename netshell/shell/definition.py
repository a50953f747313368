"""Command definitions and the parsing of command lines against them."""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from netshell.shell.context import CommandContext
from netshell.shell.errors import (
    MissingArgumentError,
    MissingFlagError,
    MissingOptionError,
    MissingOptionValueError,
    UnexpectedArgumentError,
    UnknownTokenError,
)


@dataclass
class PositionalArgument:
    """A positional argument of a command."""

    name: str = ""
    description: str = ""
    default_value: str = ""
    required: bool = False


@dataclass
class Option:
    """An option taking a value, given as ``-alias value`` or ``--name value``."""

    name: str = ""
    description: str = ""
    alias: str = ""
    default_value: str = ""
    required: bool = False


@dataclass
class Flag:
    """A boolean switch, given as ``-alias`` or ``--name``."""

    name: str = ""
    description: str = ""
    alias: str = ""
    required: bool = False


def _dashed_name(raw):
    if raw.startswith("--"):
        return raw[2:]
    if raw.startswith("-"):
        return raw[1:]
    return ""


@dataclass
class CommandDefinition:
    """A command: its name, accepted arguments, options, flags and handler."""

    name: str = ""
    description: str = ""
    arguments: List[PositionalArgument] = field(default_factory=list)
    options: List[Option] = field(default_factory=list)
    flags: List[Flag] = field(default_factory=list)
    handler: Optional[Callable[[CommandContext], None]] = None

    def find_option(self, name):
        """Return the option named or aliased ``name``, or None."""
        return next((opt for opt in self.options if name in (opt.name, opt.alias)), None)

    def find_flag(self, name):
        """Return the flag named or aliased ``name``, or None."""
        return next((flag for flag in self.flags if name in (flag.name, flag.alias)), None)

    def build_context(self, tokens):
        """Parse ``tokens`` (the command name first) into a context.

        Defaults are filled in, then required items are checked.
        """
        context = CommandContext()
        remaining = iter(list(tokens)[1:])
        for raw in remaining:
            self._process_token(context, raw, remaining)

        for arg in self.arguments:
            if not context.has_arg(arg.name) and arg.default_value:
                context.add_arg(arg.name, arg.default_value)
        for opt in self.options:
            if not context.has_option(opt.name) and opt.default_value:
                context.add_option(opt.name, opt.default_value)

        for arg in self.arguments:
            if arg.required and not context.has_arg(arg.name):
                raise MissingArgumentError(arg.name)
        for opt in self.options:
            if opt.required and not context.has_option(opt.name):
                raise MissingOptionError(opt.name)
        for flag in self.flags:
            if flag.required and not context.flag(flag.name):
                raise MissingFlagError(flag.name)

        return context

    def _process_token(self, context, raw, remaining):
        token = _dashed_name(raw)
        if token:
            flag = self.find_flag(token)
            if flag is not None:
                context.add_flag(flag.name)
                return
            opt = self.find_option(token)
            if opt is not None:
                value = next(remaining, None)
                if value is None:
                    raise MissingOptionValueError(opt.name)
                context.add_option(opt.name, value)
                return
            raise UnknownTokenError(token)

        index = context.arg_count()
        if index >= len(self.arguments):
            raise UnexpectedArgumentError(raw)
        context.add_arg(self.arguments[index].name, raw)