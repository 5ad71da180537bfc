import pytest

from slowko.config import ANSWER_LISTS, VALID_WORDS, get_word_statistics, validate_word_list_integrity
from slowko.services.word_lists import load_csv_dictionary, parse_csv_dictionary, select_word_list


def test_shipped_lists_are_consistent():
    assert validate_word_list_integrity()
    assert set(ANSWER_LISTS) == {4, 5, 6, 7}
    assert "RZEKA" in VALID_WORDS


def test_select_word_list():
    handle = select_word_list(5)

    assert handle.words == tuple(ANSWER_LISTS[5])
    assert handle.contains("rzeka")
    assert handle.contains("ROWER")
    assert not handle.contains("ABCDE")


def test_extra_hard_restricts_to_valid_words_of_length():
    handle = select_word_list(5, extra_hard_mode=True)

    assert all(len(word) == 5 for word in handle.words)
    assert handle.valid == frozenset(handle.words)
    assert not handle.contains("KOTY")


def test_custom_lists():
    handle = select_word_list(4, answer_lists={4: ["KOTY"]}, valid_words=["LASY"])

    assert handle.words == ("KOTY",)
    assert handle.contains("KOTY")
    assert handle.contains("LASY")


def test_unsupported_length():
    with pytest.raises(ValueError):
        select_word_list(9)
    with pytest.raises(ValueError):
        select_word_list(9, extra_hard_mode=True)


def test_parse_csv_dictionary():
    csv = "4,5\nkoty,rzeka\nlas,radio\n,zamek\n"

    assert parse_csv_dictionary(csv) == {
        4: {"KOTY"},
        5: {"RZEKA", "RADIO", "ZAMEK"},
    }
    assert parse_csv_dictionary("") == {}


def test_load_csv_dictionary(tmp_path):
    path = tmp_path / "dictionary.csv"
    path.write_text("5\nżurek\n", encoding="utf-8")

    assert load_csv_dictionary(str(path)) == {5: {"ŻUREK"}}


def test_word_statistics():
    stats = get_word_statistics()

    assert stats["answers_per_length"]["5"] == len(ANSWER_LISTS[5])
    assert stats["valid_words"] == len(VALID_WORDS)
