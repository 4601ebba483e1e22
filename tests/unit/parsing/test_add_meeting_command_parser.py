import pytest
from src.addressbook.domain.commands.meeting.add_meeting_command import (
    AddMeetingCommand,
)
from src.addressbook.domain.fields import (
    Description,
    Location,
    MeetingDateTime,
)
from src.addressbook.domain.index import Index
from src.addressbook.parsing.parsers.add_meeting_command_parser import (
    AddMeetingCommandParser,
)

from tests.utils.parser_assertions import (
    assert_parse_failure,
    assert_parse_success,
    invalid_format_message,
)

FORMAT_ERROR = invalid_format_message(AddMeetingCommand.MESSAGE_USAGE)


@pytest.fixture
def parser() -> AddMeetingCommandParser:
    return AddMeetingCommandParser()


def test_valid(parser: AddMeetingCommandParser) -> None:
    expected = AddMeetingCommand(
        attendee_indexes=(Index.from_one_based(3), Index.from_one_based(1)),
        description=Description("Parent teacher meeting"),
        date_time=MeetingDateTime("2026-11-02 15:30"),
        location=Location("Staff room"),
    )
    assert_parse_success(
        parser,
        " 3 1 d/Parent teacher meeting dt/2026-11-02 15:30 l/Staff room",
        expected,
    )


def test_prefix_order_does_not_matter(parser: AddMeetingCommandParser) -> None:
    first = parser.parse(" 1 d/Review dt/2026-11-02 09:00 l/Hall")
    second = parser.parse(" 1 l/Hall dt/2026-11-02 09:00 d/Review")
    assert first == second


@pytest.mark.parametrize(
    "args",
    [
        " d/Review dt/2026-11-02 09:00 l/Hall",
        " 1 a d/Review dt/2026-11-02 09:00 l/Hall",
        " 0 d/Review dt/2026-11-02 09:00 l/Hall",
        " 1 dt/2026-11-02 09:00 l/Hall",
        " 1 d/Review l/Hall",
        " 1 d/Review dt/2026-11-02 09:00",
        "",
    ],
)
def test_invalid_format(parser: AddMeetingCommandParser, args: str) -> None:
    assert_parse_failure(parser, args, FORMAT_ERROR)


def test_invalid_date_time(parser: AddMeetingCommandParser) -> None:
    assert_parse_failure(
        parser,
        " 1 d/Review dt/2026-02-30 09:00 l/Hall",
        MeetingDateTime.MESSAGE_CONSTRAINTS,
    )
