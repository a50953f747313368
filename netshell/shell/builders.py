"""Fluent builders for command definitions and their parts."""

import dataclasses

from netshell.shell.definition import (
    CommandDefinition,
    Flag,
    Option,
    PositionalArgument,
)


class PositionalArgumentBuilder:
    """Build a :class:`PositionalArgument` step by step."""

    def __init__(self):
        self._argument = PositionalArgument()

    def name(self, name):
        """Set the argument's name."""
        self._argument.name = name
        return self

    def description(self, description):
        """Set the argument's description."""
        self._argument.description = description
        return self

    def default_value(self, value):
        """Set the value used when the argument is not given."""
        self._argument.default_value = value
        return self

    def required(self):
        """Mark the argument as required."""
        self._argument.required = True
        return self

    def build(self):
        """Return a copy of the argument built so far."""
        return dataclasses.replace(self._argument)


class OptionBuilder:
    """Build an :class:`Option` step by step."""

    def __init__(self):
        self._option = Option()

    def name(self, name):
        """Set the option's name."""
        self._option.name = name
        return self

    def description(self, description):
        """Set the option's description."""
        self._option.description = description
        return self

    def alias(self, alias):
        """Set the option's short alias."""
        self._option.alias = alias
        return self

    def required(self):
        """Mark the option as required."""
        self._option.required = True
        return self

    def default_value(self, value):
        """Set the value used when the option is not given."""
        self._option.default_value = value
        return self

    def build(self):
        """Return a copy of the option built so far."""
        return dataclasses.replace(self._option)


class FlagBuilder:
    """Build a :class:`Flag` step by step."""

    def __init__(self):
        self._flag = Flag()

    def name(self, name):
        """Set the flag's name."""
        self._flag.name = name
        return self

    def description(self, description):
        """Set the flag's description."""
        self._flag.description = description
        return self

    def alias(self, alias):
        """Set the flag's short alias."""
        self._flag.alias = alias
        return self

    def required(self):
        """Mark the flag as required."""
        self._flag.required = True
        return self

    def build(self):
        """Return a copy of the flag built so far."""
        return dataclasses.replace(self._flag)


class CommandBuilder:
    """Build a :class:`CommandDefinition` step by step."""

    def __init__(self):
        self._definition = CommandDefinition()

    def name(self, name):
        """Set the command's name."""
        self._definition.name = name
        return self

    def description(self, description):
        """Set the command's description."""
        self._definition.description = description
        return self

    def arg(self, configure):
        """Add a positional argument configured by ``configure(builder)``."""
        builder = PositionalArgumentBuilder()
        configure(builder)
        self._definition.arguments.append(builder.build())
        return self

    def option(self, configure):
        """Add an option configured by ``configure(builder)``."""
        builder = OptionBuilder()
        configure(builder)
        self._definition.options.append(builder.build())
        return self

    def flag(self, configure):
        """Add a flag configured by ``configure(builder)``."""
        builder = FlagBuilder()
        configure(builder)
        self._definition.flags.append(builder.build())
        return self

    def action(self, action):
        """Set the handler called with the parsed command context."""
        self._definition.handler = action
        return self

    def build(self):
        """Return a copy of the definition built so far."""
        return dataclasses.replace(
            self._definition,
            arguments=list(self._definition.arguments),
            options=list(self._definition.options),
            flags=list(self._definition.flags),
        )