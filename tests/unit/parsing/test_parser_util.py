from datetime import datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st
from src.addressbook.common.exceptions import ParseError
from src.addressbook.common.string_utils import MAX_INDEX_VALUE
from src.addressbook.constants import MESSAGE_INVALID_INDEX
from src.addressbook.domain.fields import (
    Address,
    Description,
    Email,
    FormClass,
    Gender,
    Involvement,
    Location,
    MedicalHistory,
    MeetingDateTime,
    Name,
    Phone,
    Tag,
)
from src.addressbook.domain.index import Index
from src.addressbook.parsing import parser_util
from src.addressbook.parsing.parser_util import (
    parse_address,
    parse_description,
    parse_email,
    parse_form_class,
    parse_gender,
    parse_index,
    parse_indexes,
    parse_involvement,
    parse_location,
    parse_medical_history,
    parse_meeting_date_time,
    parse_name,
    parse_phone,
    parse_tag,
    parse_tags,
    parse_tags_for_edit,
)

WHITESPACE = " \t\r\n"


class TestParseIndex:
    @pytest.mark.parametrize(
        "raw", ["", "10 a", "a", "0", "-1", "+1", "1 2", "2147483648", "١"]
    )
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_index(raw)
        assert exc_info.value.message == MESSAGE_INVALID_INDEX

    def test_valid(self) -> None:
        assert parse_index("1") == Index.from_one_based(1)
        assert parse_index("  1  ") == Index.from_one_based(1)
        assert parse_index("007") == Index.from_one_based(7)

    @given(st.integers(min_value=1, max_value=MAX_INDEX_VALUE))
    def test_round_trip(self, value: int) -> None:
        assert parse_index(str(value)).one_based == value


class TestParseIndexes:
    def test_keeps_order(self) -> None:
        assert parse_indexes(" 3  1 2 ") == (
            Index.from_one_based(3),
            Index.from_one_based(1),
            Index.from_one_based(2),
        )

    @pytest.mark.parametrize("raw", ["", "   ", "1 a", "1 0"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ParseError):
            parse_indexes(raw)


class TestFieldParsers:
    @pytest.mark.parametrize(
        "parser,field_type,raw",
        [
            (parse_name, Name, "R@chel"),
            (parse_phone, Phone, "+651234"),
            (parse_email, Email, "example.com"),
            (parse_address, Address, "   "),
            (parse_gender, Gender, "X"),
            (parser_util.parse_involvement, Involvement, ""),
            (parser_util.parse_form_class, FormClass, "4 A"),
            (parse_tag, Tag, "#friend"),
            (parser_util.parse_description, Description, " "),
            (parse_meeting_date_time, MeetingDateTime, "2026/11/02 09:00"),
            (parser_util.parse_location, Location, ""),
        ],
    )
    def test_invalid_value_raises_constraint_message(
        self, parser, field_type, raw: str
    ) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser(raw)
        assert exc_info.value.message == field_type.MESSAGE_CONSTRAINTS

    def test_values_are_trimmed(self) -> None:
        assert parse_name(f"{WHITESPACE}Rachel Walker{WHITESPACE}") == Name("Rachel Walker")
        assert parse_phone(f"{WHITESPACE}123456{WHITESPACE}") == Phone("123456")
        assert parse_email(" rachel@example.com ") == Email("rachel@example.com")
        assert parse_address(" 123 Main Street #0505 ") == Address("123 Main Street #0505")

    def test_gender_accepts_lower_case(self) -> None:
        assert parse_gender(" f ") == Gender("F")
        assert parse_gender("m") == Gender("M")

    def test_medical_history_may_be_empty(self) -> None:
        assert parse_medical_history("   ") == MedicalHistory("")

    def test_meeting_date_time(self) -> None:
        assert parse_meeting_date_time(" 2026-11-02 09:00 ") == MeetingDateTime(
            "2026-11-02 09:00"
        )


class TestParseTags:
    def test_empty(self) -> None:
        assert parse_tags([]) == frozenset()

    def test_fails_on_any_invalid(self) -> None:
        with pytest.raises(ParseError):
            parse_tags(["friend", "#friend"])

    def test_collapses_duplicates(self) -> None:
        assert parse_tags(["friend", " friend ", "family"]) == frozenset(
            {Tag("friend"), Tag("family")}
        )

    def test_for_edit_absent(self) -> None:
        assert parse_tags_for_edit([]) is None

    def test_for_edit_single_empty_clears(self) -> None:
        assert parse_tags_for_edit([""]) == frozenset()

    def test_for_edit_empty_among_others_is_invalid(self) -> None:
        with pytest.raises(ParseError):
            parse_tags_for_edit(["friend", ""])


def _valid_text(field_type):
    """Arbitrary text accepted by ``field_type``, surrounding whitespace included."""
    return st.text().filter(field_type.is_valid)


class TestRoundTrips:
    @given(st.from_regex(Name.VALIDATION_REGEX, fullmatch=True))
    def test_name(self, value: str) -> None:
        name = Name(value)
        assert parse_name(str(name)) == name

    @given(st.from_regex(Phone.VALIDATION_REGEX, fullmatch=True))
    def test_phone(self, value: str) -> None:
        phone = Phone(value)
        assert parse_phone(str(phone)) == phone

    @given(
        st.from_regex(
            r"[a-z0-9]{1,8}([._+-][a-z0-9]{1,8})?@[a-z0-9]{1,8}\.[a-z0-9]{2,8}",
            fullmatch=True,
        )
    )
    def test_email(self, value: str) -> None:
        email = Email(value)
        assert parse_email(str(email)) == email

    @given(_valid_text(Address))
    def test_address(self, value: str) -> None:
        address = Address(value)
        assert parse_address(str(address)) == address

    @given(st.sampled_from(Gender.VALID_VALUES))
    def test_gender(self, value: str) -> None:
        gender = Gender(value)
        assert parse_gender(str(gender)) == gender

    @given(_valid_text(Involvement))
    def test_involvement(self, value: str) -> None:
        involvement = Involvement(value)
        assert parse_involvement(str(involvement)) == involvement

    @given(st.from_regex(FormClass.VALIDATION_REGEX, fullmatch=True))
    def test_form_class(self, value: str) -> None:
        form_class = FormClass(value)
        assert parse_form_class(str(form_class)) == form_class

    @given(_valid_text(MedicalHistory))
    def test_medical_history(self, value: str) -> None:
        medical_history = MedicalHistory(value)
        assert parse_medical_history(str(medical_history)) == medical_history

    @given(st.from_regex(Tag.VALIDATION_REGEX, fullmatch=True))
    def test_tag(self, value: str) -> None:
        tag = Tag(value)
        assert parse_tag(str(tag)) == tag

    @given(_valid_text(Description))
    def test_description(self, value: str) -> None:
        description = Description(value)
        assert parse_description(str(description)) == description

    @given(_valid_text(Location))
    def test_location(self, value: str) -> None:
        location = Location(value)
        assert parse_location(str(location)) == location

    @given(
        st.datetimes(
            min_value=datetime(2000, 1, 1), max_value=datetime(2099, 12, 31, 23, 59)
        )
    )
    def test_meeting_date_time(self, moment: datetime) -> None:
        date_time = MeetingDateTime(moment.strftime(MeetingDateTime.FORMAT))
        assert parse_meeting_date_time(str(date_time)) == date_time

    @pytest.mark.parametrize(
        "field_type,parse,raw",
        [
            (Name, parse_name, "Amy "),
            (MedicalHistory, parse_medical_history, " ADHD"),
            (Address, parse_address, "Blk 1 "),
            (Involvement, parse_involvement, "Choir\n"),
            (Description, parse_description, "\tBudget"),
            (Location, parse_location, "Hall "),
        ],
    )
    def test_untrimmed_text_is_not_a_field_value(self, field_type, parse, raw: str) -> None:
        assert not field_type.is_valid(raw)
        assert str(parse(raw)) == raw.strip()
