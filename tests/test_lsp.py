import pytest

from patternkit.lsp import Rectangle, Square, use_it


def test_rectangle_sides_are_independent():
    rc = Rectangle(3, 4)
    rc.height = 7
    assert (rc.width, rc.height) == (3, 7)
    rc.width = 5
    assert (rc.width, rc.height) == (5, 7)


def test_square_keeps_sides_equal():
    sq = Square(6)
    sq.width = 9
    assert sq.width == sq.height == 9
    sq.height = 2
    assert sq.width == sq.height == 2


@pytest.mark.parametrize("width,height", [(20, 20), (3, 8), (1, 1)])
def test_use_it_on_rectangle_matches_expectation(width, height):
    rc = Rectangle(width, height)
    expected, actual = use_it(rc)
    assert expected == actual
    assert rc.width == width


def test_use_it_on_square_breaks_expectation(capsys):
    sq = Square(20)
    expected, actual = use_it(sq)
    assert expected == 200
    assert actual == 100
    assert capsys.readouterr().out == "200 100\n"


def test_use_it_on_square_of_size_ten_agrees():
    expected, actual = use_it(Square(10))
    assert expected == actual