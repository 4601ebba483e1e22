from __future__ import annotations

from src.addressbook.common.exceptions import ParseError
from src.addressbook.domain.commands.meeting.add_meeting_command import (
    AddMeetingCommand,
)
from src.addressbook.interfaces.parser_interface import IParser
from src.addressbook.parsing.argument_tokenizer import tokenize
from src.addressbook.parsing.cli_syntax import (
    MEETING_PREFIXES,
    PREFIX_DATE_TIME,
    PREFIX_DESCRIPTION,
    PREFIX_LOCATION,
)
from src.addressbook.parsing.parser_util import (
    are_prefixes_present,
    invalid_format,
    parse_description,
    parse_indexes,
    parse_location,
    parse_meeting_date_time,
)


class AddMeetingCommandParser(IParser[AddMeetingCommand]):
    """Parses ``INDEX [MORE_INDEXES]... d/DESCRIPTION dt/DATE_TIME l/LOCATION``."""

    def parse(self, args: str) -> AddMeetingCommand:
        multimap = tokenize(args, *MEETING_PREFIXES)
        if not are_prefixes_present(
            multimap, PREFIX_DESCRIPTION, PREFIX_DATE_TIME, PREFIX_LOCATION
        ):
            raise invalid_format(AddMeetingCommand.MESSAGE_USAGE)

        try:
            attendee_indexes = parse_indexes(multimap.get_preamble())
        except ParseError as exc:
            raise invalid_format(AddMeetingCommand.MESSAGE_USAGE) from exc

        return AddMeetingCommand(
            attendee_indexes=attendee_indexes,
            description=parse_description(multimap.get_value(PREFIX_DESCRIPTION) or ""),
            date_time=parse_meeting_date_time(multimap.get_value(PREFIX_DATE_TIME) or ""),
            location=parse_location(multimap.get_value(PREFIX_LOCATION) or ""),
        )
