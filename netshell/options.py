"""Command-line option processing through pluggable handlers."""

import abc

from netshell.factory import Factory
from netshell.strings import RED, RESET


class OptionError(Exception):
    """Raised when an option is unknown or malformed."""

    def __init__(self, option, message):
        self.option = option
        self.message = f"{option}: {RED}{message}{RESET}"
        super().__init__(self.message)


class OptionHandler(abc.ABC):
    """Handles one option, consuming it from the remaining arguments."""

    @abc.abstractmethod
    def __call__(self, args, remaining):
        """Consume the option from ``remaining``; ``args`` is the original argv."""

    @abc.abstractmethod
    def option(self):
        """Return the value collected for the option."""

    @abc.abstractmethod
    def has_option(self):
        """Tell whether the option was seen."""


class Options:
    """Dispatch options in an argument list to registered handlers."""

    def __init__(self, argv):
        self._args = list(argv)
        self._remaining = list(self._args)
        self._factory = Factory()
        self._handlers = {}

    def register(self, option, handler_class):
        """Register a handler class for ``option`` and create its instance."""
        self._factory.register(option, handler_class)
        self._handlers[option] = self._factory.create(option)

    def process_args(self):
        """Run handlers on every option and return the arguments left over."""
        if not any(arg.startswith("-") for arg in self._args):
            return list(self._remaining)

        # Handlers remove what they consume, so the position only advances
        # past plain arguments.
        position = 0
        while position < len(self._remaining):
            current = self._remaining[position]
            if not current.startswith("-"):
                position += 1
                continue
            handler = self._handlers.get(current)
            if handler is None:
                raise OptionError(current, "Unknown option")
            handler(self._args, self._remaining)

        return list(self._remaining)

    def _handler(self, name):
        try:
            return self._handlers[name]
        except KeyError:
            raise KeyError(f'Unknown option "{name}"') from None

    def option(self, name):
        """Return the value collected by the handler for ``name``."""
        return self._handler(name).option()

    def has_option(self, name):
        """Tell whether the handler for ``name`` saw its option."""
        return self._handler(name).has_option()