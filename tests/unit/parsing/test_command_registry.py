import pytest
from src.addressbook.domain.commands.general.help_command import HelpCommand
from src.addressbook.domain.commands.general.list_command import ListCommand
from src.addressbook.parsing.command_registry import (
    CommandRegistry,
    build_command_registry,
)
from src.addressbook.parsing.parsers.no_argument_parser import NoArgumentCommandParser

EXPECTED_WORDS = {
    "student", "teacher", "meeting",
    "edit-s", "edit-t", "edit-m",
    "delete-s", "delete-t", "delete-m",
    "medical",
    "find", "find-t", "find-m",
    "list", "list-s", "list-t", "list-m",
    "clear", "clear-s", "clear-t", "clear-m",
    "copy", "help", "exit",
}


def test_build_registers_every_command() -> None:
    registry = build_command_registry()
    words = registry.get_registered_commands()
    assert set(words) == EXPECTED_WORDS
    assert len(words) == len(EXPECTED_WORDS)


def test_usages_cover_every_command() -> None:
    registry = build_command_registry()
    usages = registry.get_usages()
    assert len(usages) == len(EXPECTED_WORDS)
    assert HelpCommand.MESSAGE_USAGE in usages


def test_duplicate_word_rejected() -> None:
    registry = CommandRegistry()
    registry.register_command(ListCommand)
    with pytest.raises(ValueError, match="already registered"):
        registry.register_command(ListCommand)


def test_default_parser_is_argument_free() -> None:
    registry = CommandRegistry()
    registry.register_command(ListCommand)
    parser = registry.get_parser("list")
    assert isinstance(parser, NoArgumentCommandParser)
    assert parser.parse(" anything") == ListCommand()


def test_lookup_is_exact() -> None:
    registry = build_command_registry()
    assert registry.has_command("list")
    assert not registry.has_command("List")
    assert not registry.has_command("lis")
    with pytest.raises(KeyError):
        registry.get_parser("lis")


def test_missing_command_word_rejected() -> None:
    class Nameless:
        pass

    with pytest.raises(ValueError, match="non-empty"):
        CommandRegistry().register_command(Nameless)  # type: ignore[arg-type]
