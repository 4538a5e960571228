import pytest

from numberinput.core import count_significant, group, map_cursor, sanitize


def reformat(text, caret, allow_decimal=False):
    display = group(sanitize(text, allow_decimal))
    return display, map_cursor(text, caret, display)


def test_count_significant_skips_separators():
    assert count_significant("1,234.5") == 6
    assert count_significant("1,234.5", 2) == 1
    assert count_significant("") == 0


def test_insert_digit_after_first_group_digit():
    # "1,234" with the caret after "1", user types "9"
    assert reformat("19,234", 2) == ("19,234", 2)


def test_typing_at_end_keeps_caret_at_end():
    assert reformat("1234", 4) == ("1,234", 5)
    assert reformat("1,2345", 6) == ("12,345", 6)


def test_caret_at_start_stays_at_start():
    assert map_cursor("1,234", 0, "1,234") == 0
    assert reformat("x1234", 0) == ("1,234", 0)


def test_caret_before_separator_that_appears():
    # "123" -> type "4" at the front: "4123", caret 1
    assert reformat("4123", 1) == ("4,123", 1)


def test_caret_moves_over_inserted_separator():
    # "123" -> type "4" after "1": "1423", caret 2 -> "1,423" caret after "4"
    assert reformat("1423", 2) == ("1,423", 3)


def test_backspace_on_separator_deletes_nothing():
    # "1,234", caret after the ",", backspace removes the separator
    display, caret = reformat("1234", 1)
    assert display == "1,234"
    assert caret == 1


def test_forward_delete_on_separator_deletes_nothing():
    # "1,234", caret before the ",", delete removes the separator
    assert reformat("1234", 1) == ("1,234", 1)


def test_backspace_digit_after_separator():
    # "1,234", caret after "2", backspace removes "2" -> "1,34", caret 2
    assert reformat("1,34", 2) == ("134", 1)


def test_deleting_a_digit_removes_a_separator_left_of_caret():
    # "12,345", caret at end, backspace -> "12,34" -> "1,234"
    assert reformat("12,34", 5) == ("1,234", 5)


def test_rejected_character_does_not_move_caret():
    # "1,234", caret after "1", user types "a"
    assert reformat("1a,234", 2) == ("1,234", 1)


def test_second_decimal_point_is_dropped_and_caret_stays():
    # "12.5", caret after "2", user types "."
    display, caret = reformat("12..5", 3, allow_decimal=True)
    assert display == "12.5"
    assert caret == 3


def test_decimal_point_counts_as_significant():
    assert reformat("1234.5", 6, allow_decimal=True) == ("1,234.5", 7)
    assert reformat("1234.", 5, allow_decimal=True) == ("1,234.", 6)


@pytest.mark.parametrize("caret", [-5, 99])
def test_out_of_range_caret_is_clamped(caret):
    new_caret = map_cursor("1234", caret, "1,234")
    assert 0 <= new_caret <= len("1,234")
    assert new_caret == (0 if caret < 0 else 5)


def test_caret_goes_to_end_when_digits_disappear():
    assert map_cursor("12345", 5, "123") == 3
    assert map_cursor("12", 2, "") == 0


def test_paste_with_foreign_formatting():
    # pasted "1 234 567" with caret at the end
    assert reformat("1 234 567", 9) == ("1,234,567", 9)


@pytest.mark.parametrize("digits", ["1", "12", "123", "1234", "12345", "123456", "1234567"])
def test_appending_a_digit_keeps_earlier_digits_in_front_of_caret(digits):
    display = group(digits)
    for position in range(len(display) + 1):
        before = count_significant(display, position)
        new_display, new_caret = reformat(display + "9", position)
        assert count_significant(new_display, new_caret) == before
