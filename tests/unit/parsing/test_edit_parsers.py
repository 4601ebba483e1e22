import pytest
from src.addressbook.constants import MESSAGE_NOT_EDITED
from src.addressbook.domain.commands.meeting.edit_meeting_command import (
    EditMeetingCommand,
)
from src.addressbook.domain.commands.student.edit_student_command import (
    EditStudentCommand,
)
from src.addressbook.domain.commands.teacher.edit_teacher_command import (
    EditTeacherCommand,
)
from src.addressbook.domain.descriptors import (
    EditMeetingDescriptor,
    EditStudentDescriptor,
    EditTeacherDescriptor,
)
from src.addressbook.domain.fields import (
    Address,
    Description,
    Email,
    FormClass,
    Gender,
    Involvement,
    Location,
    MeetingDateTime,
    Name,
    Phone,
    Tag,
)
from src.addressbook.domain.index import Index
from src.addressbook.parsing.parsers.edit_parsers import (
    EditMeetingCommandParser,
    EditStudentCommandParser,
    EditTeacherCommandParser,
)

from tests.utils.parser_assertions import (
    assert_parse_failure,
    assert_parse_success,
    invalid_format_message,
)

FIRST = Index.from_one_based(1)
SECOND = Index.from_one_based(2)
STUDENT_FORMAT_ERROR = invalid_format_message(EditStudentCommand.MESSAGE_USAGE)
TEACHER_FORMAT_ERROR = invalid_format_message(EditTeacherCommand.MESSAGE_USAGE)
MEETING_FORMAT_ERROR = invalid_format_message(EditMeetingCommand.MESSAGE_USAGE)


class TestEditStudentCommandParser:
    parser = EditStudentCommandParser()

    @pytest.mark.parametrize(
        "args,message",
        [
            (" n/Amy", STUDENT_FORMAT_ERROR),
            (" 1", MESSAGE_NOT_EDITED),
            ("", STUDENT_FORMAT_ERROR),
            (" -5 n/Amy", STUDENT_FORMAT_ERROR),
            (" 0 n/Amy", STUDENT_FORMAT_ERROR),
            (" 1 some random string", STUDENT_FORMAT_ERROR),
            (" 1 z/ string", STUDENT_FORMAT_ERROR),
            (" 2147483648 n/Amy", STUDENT_FORMAT_ERROR),
        ],
    )
    def test_invalid_preamble_or_nothing_to_edit(self, args: str, message: str) -> None:
        assert_parse_failure(self.parser, args, message)

    @pytest.mark.parametrize(
        "args,message",
        [
            (" 1 n/James&", Name.MESSAGE_CONSTRAINTS),
            (" 1 p/911a", Phone.MESSAGE_CONSTRAINTS),
            (" 1 e/bob!yahoo", Email.MESSAGE_CONSTRAINTS),
            (" 1 a/", Address.MESSAGE_CONSTRAINTS),
            (" 1 g/Q", Gender.MESSAGE_CONSTRAINTS),
            (" 1 i/", Involvement.MESSAGE_CONSTRAINTS),
            (" 1 ec/12", Phone.MESSAGE_CONSTRAINTS),
            (" 1 f/4-A", FormClass.MESSAGE_CONSTRAINTS),
            (" 1 t/hubby*", Tag.MESSAGE_CONSTRAINTS),
            (" 1 t/friend t/", Tag.MESSAGE_CONSTRAINTS),
        ],
    )
    def test_invalid_value(self, args: str, message: str) -> None:
        assert_parse_failure(self.parser, args, message)

    def test_all_fields(self) -> None:
        args = (
            " 2 p/22222222 t/husband e/amy@example.com a/Block 312 n/Amy Bee"
            " g/f i/Choir ec/33333333 f/2C t/friend"
        )
        descriptor = EditStudentDescriptor(
            name=Name("Amy Bee"),
            phone=Phone("22222222"),
            email=Email("amy@example.com"),
            address=Address("Block 312"),
            gender=Gender("F"),
            involvement=Involvement("Choir"),
            tags=frozenset({Tag("husband"), Tag("friend")}),
            emergency_contact=Phone("33333333"),
            form_class=FormClass("2C"),
        )
        assert_parse_success(self.parser, args, EditStudentCommand(SECOND, descriptor))

    def test_some_fields(self) -> None:
        descriptor = EditStudentDescriptor(phone=Phone("22222222"), form_class=FormClass("3B"))
        assert_parse_success(
            self.parser, " 1 p/22222222 f/3B", EditStudentCommand(FIRST, descriptor)
        )

    def test_repeated_field_uses_last_value(self) -> None:
        descriptor = EditStudentDescriptor(phone=Phone("33333333"))
        assert_parse_success(
            self.parser, " 1 p/22222222 p/33333333", EditStudentCommand(FIRST, descriptor)
        )

    def test_single_empty_tag_clears_tags(self) -> None:
        descriptor = EditStudentDescriptor(tags=frozenset())
        assert_parse_success(self.parser, " 1 t/", EditStudentCommand(FIRST, descriptor))

    def test_medical_history_prefix_is_not_editable(self) -> None:
        assert_parse_failure(self.parser, " 1 m/ADHD", STUDENT_FORMAT_ERROR)


class TestEditTeacherCommandParser:
    parser = EditTeacherCommandParser()

    def test_name_only(self) -> None:
        descriptor = EditTeacherDescriptor(name=Name("Bob Choo"))
        assert_parse_success(self.parser, " 1 n/Bob Choo", EditTeacherCommand(FIRST, descriptor))

    def test_nothing_to_edit(self) -> None:
        assert_parse_failure(self.parser, " 1", MESSAGE_NOT_EDITED)

    def test_missing_index(self) -> None:
        assert_parse_failure(self.parser, " n/Bob", TEACHER_FORMAT_ERROR)

    def test_student_prefix_is_plain_text(self) -> None:
        # ec/ is not a teacher prefix, so it ends up in the preamble
        assert_parse_failure(self.parser, " 1 ec/123", TEACHER_FORMAT_ERROR)

    def test_clear_tags(self) -> None:
        descriptor = EditTeacherDescriptor(tags=frozenset())
        assert_parse_success(self.parser, " 2 t/", EditTeacherCommand(SECOND, descriptor))


class TestEditMeetingCommandParser:
    parser = EditMeetingCommandParser()

    def test_all_fields(self) -> None:
        descriptor = EditMeetingDescriptor(
            description=Description("Staff meeting"),
            date_time=MeetingDateTime("2026-12-01 08:00"),
            location=Location("Hall"),
        )
        assert_parse_success(
            self.parser,
            " 1 d/Staff meeting dt/2026-12-01 08:00 l/Hall",
            EditMeetingCommand(FIRST, descriptor),
        )

    def test_location_only(self) -> None:
        descriptor = EditMeetingDescriptor(location=Location("Library"))
        assert_parse_success(self.parser, " 2 l/Library", EditMeetingCommand(SECOND, descriptor))

    @pytest.mark.parametrize(
        "args,message",
        [
            (" 1", MESSAGE_NOT_EDITED),
            (" l/Hall", MEETING_FORMAT_ERROR),
            (" a l/Hall", MEETING_FORMAT_ERROR),
            (" 1 dt/tomorrow", MeetingDateTime.MESSAGE_CONSTRAINTS),
            (" 1 d/", Description.MESSAGE_CONSTRAINTS),
            (" 1 l/ ", Location.MESSAGE_CONSTRAINTS),
        ],
    )
    def test_invalid(self, args: str, message: str) -> None:
        assert_parse_failure(self.parser, args, message)
