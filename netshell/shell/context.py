"""Values parsed from one command line."""


class CommandContext:
    """The positional arguments, options and flags of a parsed command."""

    def __init__(self):
        self._args = []
        self._options = {}
        self._flags = []

    def arg(self, name):
        """Return the value of positional argument ``name``."""
        for key, value in self._args:
            if key == name:
                return value
        raise KeyError(f"Argument {name} not found")

    def has_arg(self, name):
        """Tell whether positional argument ``name`` was given."""
        return any(key == name for key, _ in self._args)

    def arg_count(self):
        """Return how many positional arguments were given."""
        return len(self._args)

    def option(self, name):
        """Return the value of option ``name``."""
        try:
            return self._options[name]
        except KeyError:
            raise KeyError(f"Option {name} not found") from None

    def has_option(self, name):
        """Tell whether option ``name`` has a value."""
        return name in self._options

    def flag(self, name):
        """Tell whether flag ``name`` was given."""
        return name in self._flags

    def add_arg(self, name, value):
        """Record a positional argument."""
        self._args.append((name, value))

    def add_option(self, name, value):
        """Record an option value; an existing value is kept."""
        self._options.setdefault(name, value)

    def add_flag(self, name):
        """Record a flag."""
        self._flags.append(name)