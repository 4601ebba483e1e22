import pytest
from src.addressbook.common.string_utils import (
    MAX_INDEX_VALUE,
    contains_word_ignore_case,
    is_non_zero_unsigned_integer,
)


class TestIsNonZeroUnsignedInteger:
    @pytest.mark.parametrize(
        "value",
        ["", "a", "aaa", "0", "00", "-1", "+1", " 10", "10 ", "1 0", "٣", "2147483648"],
    )
    def test_rejects(self, value: str) -> None:
        assert is_non_zero_unsigned_integer(value) is False

    @pytest.mark.parametrize("value", ["1", "10", "01", str(MAX_INDEX_VALUE)])
    def test_accepts(self, value: str) -> None:
        assert is_non_zero_unsigned_integer(value) is True


class TestContainsWordIgnoreCase:
    def test_empty_word_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            contains_word_ignore_case("typical sentence", "  ")

    def test_multiple_words_are_rejected(self) -> None:
        with pytest.raises(ValueError, match="single word"):
            contains_word_ignore_case("typical sentence", "aaa BBB")

    @pytest.mark.parametrize(
        "sentence,word",
        [
            ("", "abc"),
            ("    ", "123"),
            ("aaa bbb ccc", "bb"),
            ("aaa bbb ccc", "bbbb"),
        ],
    )
    def test_no_match(self, sentence: str, word: str) -> None:
        assert contains_word_ignore_case(sentence, word) is False

    @pytest.mark.parametrize(
        "sentence,word",
        [
            ("aaa bBb ccc", "Bbb"),
            ("aaa bBb ccc@1", "CCc@1"),
            ("  AAA   bBb   ccc  ", "aaa"),
            ("Aaa", "aaa"),
            ("aaa bbb ccc", "  ccc  "),
        ],
    )
    def test_match(self, sentence: str, word: str) -> None:
        assert contains_word_ignore_case(sentence, word) is True
