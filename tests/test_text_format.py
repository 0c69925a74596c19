import pytest

from patternkit.text_format import BetterFormattedText, FormattedText, TextRange

TEXT = "This is a brave new world"


def test_formatted_text_without_marks_is_unchanged():
    assert str(FormattedText(TEXT)) == TEXT


def test_formatted_text_capitalizes_inclusive_range():
    ft = FormattedText(TEXT)
    ft.capitalize(10, 15)
    result = str(ft)
    assert result[10:16] == TEXT[10:16].upper()
    assert result[:10] == TEXT[:10]
    assert result[16:] == TEXT[16:]


def test_formatted_text_keeps_length_and_letters():
    ft = FormattedText(TEXT)
    ft.capitalize(0, len(TEXT) - 1)
    assert str(ft) == TEXT.upper()
    assert str(ft).lower() == TEXT.lower()


def test_formatted_text_rejects_out_of_range():
    ft = FormattedText(TEXT)
    with pytest.raises(IndexError):
        ft.capitalize(20, len(TEXT))


def test_text_range_covers_both_ends():
    r = TextRange(3, 5)
    assert r.covers(3)
    assert r.covers(5)
    assert not r.covers(2)
    assert not r.covers(6)


def test_range_is_registered_and_returned():
    bft = BetterFormattedText(TEXT)
    r = bft.range(16, 19)
    r.capitalize = True
    assert bft.formatting == [r]
    assert (r.start, r.end, r.capitalize) == (16, 19, True)


def test_better_formatted_text_capitalizes_range():
    bft = BetterFormattedText(TEXT)
    bft.range(16, 19).capitalize = True
    result = str(bft)
    assert result[16:20] == TEXT[16:20].upper()
    assert result[:16] == TEXT[:16]
    assert result[20:] == TEXT[20:]


def test_both_approaches_agree():
    ft = FormattedText(TEXT)
    ft.capitalize(16, 19)
    bft = BetterFormattedText(TEXT)
    bft.range(16, 19).capitalize = True
    assert str(ft) == str(bft)


def test_better_formatted_text_without_ranges_is_unchanged():
    assert str(BetterFormattedText(TEXT)) == TEXT