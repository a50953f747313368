import pytest

from netshell.shell.builders import (
    CommandBuilder,
    FlagBuilder,
    OptionBuilder,
    PositionalArgumentBuilder,
)
from netshell.shell.definition import Flag, Option, PositionalArgument
from netshell.shell.errors import MissingArgumentError


def test_positional_argument_builder_sets_fields():
    argument = (
        PositionalArgumentBuilder()
        .name("message")
        .description("Message to send to the server")
        .default_value("hi")
        .required()
        .build()
    )
    assert argument == PositionalArgument(
        "message", "Message to send to the server", "hi", True
    )


def test_positional_argument_defaults():
    argument = PositionalArgumentBuilder().name("x").build()
    assert argument.required is False
    assert argument.default_value == ""


def test_option_builder_sets_fields():
    option = (
        OptionBuilder()
        .name("port")
        .alias("p")
        .description("the port")
        .default_value("4242")
        .required()
        .build()
    )
    assert option == Option("port", "the port", "p", "4242", True)


def test_flag_builder_sets_fields():
    flag = FlagBuilder().name("verbose").alias("v").description("d").required().build()
    assert flag == Flag("verbose", "d", "v", True)


def test_builder_build_returns_copy():
    builder = FlagBuilder().name("a")
    first = builder.build()
    builder.name("b")
    assert first.name == "a"
    assert builder.build().name == "b"


def test_command_builder_collects_parts():
    calls = []
    definition = (
        CommandBuilder()
        .name("send")
        .description("Send a command to the server")
        .arg(lambda b: b.name("message").required())
        .option(lambda b: b.name("host").alias("h"))
        .flag(lambda b: b.name("quiet").alias("q"))
        .action(calls.append)
        .build()
    )
    assert definition.name == "send"
    assert definition.description == "Send a command to the server"
    assert [a.name for a in definition.arguments] == ["message"]
    assert [o.alias for o in definition.options] == ["h"]
    assert [f.name for f in definition.flags] == ["quiet"]
    definition.handler("ctx")
    assert calls == ["ctx"]


def test_command_builder_build_is_independent():
    builder = CommandBuilder().name("cmd").arg(lambda b: b.name("one"))
    first = builder.build()
    builder.arg(lambda b: b.name("two"))
    assert [a.name for a in first.arguments] == ["one"]
    assert [a.name for a in builder.build().arguments] == ["one", "two"]


def test_built_definition_parses_tokens():
    definition = (
        CommandBuilder()
        .name("send")
        .arg(lambda b: b.name("message").required())
        .flag(lambda b: b.name("quiet").alias("q"))
        .build()
    )
    context = definition.build_context(["send", "-q", "hello"])
    assert context.arg("message") == "hello"
    assert context.flag("quiet") is True
    with pytest.raises(MissingArgumentError):
        definition.build_context(["send"])