"""Tests for the TextView primitive."""

from rich.style import Style

from termstack.primitives import Container, ContainerDirection, Focusable, Item, TextView
from termstack.screen import Canvas


def draw_view(view: TextView, width: int, height: int) -> Canvas:
    canvas = Canvas(width, height)
    view.set_rect(0, 0, width, height)
    view.draw(canvas)
    return canvas


class TestText:
    """Tests for text editing."""

    def test_initial_text(self) -> None:
        """Test the constructor text is kept."""
        assert TextView("hello").get_text() == "hello"
        assert TextView().get_text() == ""

    def test_write_appends(self) -> None:
        """Test write appends and returns the characters written."""
        view = TextView("ab")
        assert view.write("cd") == 2
        assert view.get_text() == "abcd"

    def test_set_text_replaces(self) -> None:
        """Test set_text replaces the text and chains."""
        view = TextView("old")
        assert view.set_text("new") is view
        assert view.get_text() == "new"

    def test_clear(self) -> None:
        """Test clear empties the view."""
        view = TextView("text")
        assert view.clear() is view
        assert view.get_text() == ""

    def test_is_item_and_focusable(self) -> None:
        """Test TextView satisfies both protocols."""
        view = TextView()
        assert isinstance(view, Item)
        assert isinstance(view, Focusable)


class TestWrap:
    """Tests for line wrapping."""

    def test_wraps_on_words(self) -> None:
        """Test long text is wrapped at word boundaries."""
        assert TextView("hello world foo").wrap(5) == ["hello", "world", "foo"]

    def test_keeps_empty_lines(self) -> None:
        """Test blank paragraphs stay as empty lines."""
        assert TextView("a\n\nb").wrap(10) == ["a", "", "b"]

    def test_empty_text_is_one_line(self) -> None:
        """Test empty text wraps to a single empty line."""
        assert TextView().wrap(10) == [""]

    def test_no_width_gives_no_lines(self) -> None:
        """Test a non-positive width wraps to nothing."""
        assert TextView("text").wrap(0) == []

    def test_long_word_is_split(self) -> None:
        """Test words longer than the width are broken."""
        assert TextView("abcdefg").wrap(3) == ["abc", "def", "g"]

    def test_wraps_by_cell_width(self) -> None:
        """Test wide characters count two cells when wrapping."""
        assert TextView("你好世界你好").wrap(4) == ["你好", "世界", "你好"]

    def test_keeps_trailing_whitespace(self) -> None:
        """Test spaces after the last word stay on the last line."""
        assert TextView("ab ").wrap(5) == ["ab "]
        assert TextView("one two ").wrap(4) == ["one", "two "]

    def test_trailing_whitespace_fits_width(self) -> None:
        """Test trailing spaces never make a line wider than the width."""
        assert TextView("ab     ").wrap(4) == ["ab  "]


class TestNaturalSize:
    """Tests for natural size reporting."""

    def test_height_counts_wrapped_lines(self) -> None:
        """Test natural height is the wrapped line count plus border."""
        view = TextView("hello world", border=True)
        assert view.get_height(7) == 4

    def test_height_at_least_one_line(self) -> None:
        """Test an empty view still asks for one row."""
        assert TextView().get_height(10) == 1
        assert TextView(border=True).get_height(10) == 3

    def test_width_is_longest_line(self) -> None:
        """Test natural width is the longest line plus border."""
        view = TextView("ab\nabcd", border=True)
        assert view.get_width(5) == 6

    def test_width_counts_cells(self) -> None:
        """Test wide characters count as two cells."""
        assert TextView("日本").get_width(1) == 4

    def test_natural_height_in_row_container(self) -> None:
        """Test a row container stacks views at their natural height."""
        top = TextView("one two three", border=True)
        bottom = TextView("x", border=True)
        container = Container(ContainerDirection.ROW).add_item(top, -1).add_item(bottom, -1)
        container.set_rect(0, 0, 9, 20)
        container.draw(Canvas(9, 20))
        assert top.get_rect().height == 4
        assert bottom.get_rect().y == 4
        assert bottom.get_rect().height == 3


class TestDraw:
    """Tests for drawing text."""

    def test_draws_text_inside_border(self) -> None:
        """Test text is written inside the border."""
        canvas = draw_view(TextView("hi", border=True), 6, 3)
        assert canvas.lines()[1] == "│hi  │"

    def test_shows_tail_when_overflowing(self) -> None:
        """Test the last lines are visible when text is too long."""
        canvas = draw_view(TextView("one\ntwo\nthree"), 5, 2)
        assert canvas.lines() == ["two  ", "three"]

    def test_text_uses_theme_colour(self) -> None:
        """Test text is drawn in the screen's primary text colour."""
        canvas = draw_view(TextView("a"), 2, 1)
        expected = Style(color=canvas.styles.primary_text).color
        assert canvas.get_content(0, 0).style.color == expected

    def test_text_colour_override(self) -> None:
        """Test an explicit text colour wins over the theme."""
        canvas = draw_view(TextView("a", text_color="red"), 2, 1)
        assert canvas.get_content(0, 0).style.color == Style(color="red").color

    def test_no_cursor_when_unfocused(self) -> None:
        """Test an unfocused view leaves the cursor hidden."""
        canvas = draw_view(TextView("hi"), 5, 1)
        assert canvas.cursor is None

    def test_cursor_after_text_when_focused(self) -> None:
        """Test the cursor follows the last character."""
        view = TextView("hi\nabc")
        view.focus(lambda item: None)
        canvas = draw_view(view, 6, 3)
        assert canvas.cursor == (3, 1)

    def test_cursor_stays_inside(self) -> None:
        """Test the cursor never leaves the inner rectangle."""
        view = TextView("hello", border=True)
        view.focus(lambda item: None)
        canvas = draw_view(view, 7, 3)
        assert canvas.cursor == (5, 1)

    def test_empty_inner_rect_draws_only_box(self) -> None:
        """Test a view too small for text draws just its border."""
        view = TextView("hello", border=True)
        view.focus(lambda item: None)
        canvas = draw_view(view, 2, 2)
        assert canvas.lines() == ["╔╗", "╚╝"]
        assert canvas.cursor is None

    def test_wide_text_fully_shown(self) -> None:
        """Test wrapped wide characters all fit in a narrow view."""
        canvas = draw_view(TextView("你好世界你好"), 4, 3)
        assert canvas.lines() == ["你好", "世界", "你好"]

    def test_cursor_after_trailing_space(self) -> None:
        """Test the cursor moves past a typed space."""
        view = TextView("ab ")
        view.focus(lambda item: None)
        canvas = draw_view(view, 5, 1)
        assert canvas.cursor == (3, 0)
