"""Tests for the text block terminator scanner and the cursor."""

from resume_lang import Cursor, find_text_block_end


class TestTerminator:
    """Tests for locating the closing `end` line of a text block."""

    def test_end_inside_line_is_body(self):
        buffer = "\nfoo\nbar end\nend"
        found = find_text_block_end(buffer)
        assert found.terminated
        assert found.body == "\nfoo\nbar end"
        assert found.consumed == len(buffer)

    def test_indented_terminator(self):
        buffer = "\nbody\n   end  \nrest"
        found = find_text_block_end(buffer)
        assert found.body == "\nbody"
        assert buffer[found.consumed :] == "  \nrest"

    def test_first_terminator_wins(self):
        found = find_text_block_end("\none\nend\ntwo\nend")
        assert found.body == "\none"
        assert found.consumed == len("\none\nend")

    def test_lookalike_lines_are_not_terminators(self):
        found = find_text_block_end("\nthe end\nend.\nending\n")
        assert not found.terminated
        assert found.body == "\nthe end\nend.\nending"

    def test_same_line_end_does_not_close(self):
        found = find_text_block_end(" end")
        assert not found.terminated
        assert found.consumed == 4

    def test_empty_body(self):
        found = find_text_block_end("\nend\nlabel a:b")
        assert found.terminated
        assert found.body == ""

    def test_body_trailing_whitespace_trimmed(self):
        found = find_text_block_end("\nbody   \n\n  \nend")
        assert found.body == "\nbody"


class TestCursor:
    """Tests for the character cursor."""

    def test_starts_before_first_character(self):
        cursor = Cursor("abc")
        assert cursor.position == -1
        assert cursor.current() is None
        assert cursor.peek_ahead() == "a"

    def test_advance_and_retreat(self):
        cursor = Cursor("abc")
        assert cursor.advance() == "a"
        assert cursor.advance(2) == "c"
        assert cursor.advance() is None
        assert cursor.retreat(2) == "b"
        assert cursor.retreat(5) is None

    def test_peek_does_not_move(self):
        cursor = Cursor("abc")
        cursor.advance()
        assert cursor.peek_ahead() == "b"
        assert cursor.peek_ahead(2) == "c"
        assert cursor.peek_ahead(3) is None
        assert cursor.peek_behind() is None
        assert cursor.position == 0

    def test_position_is_settable(self):
        cursor = Cursor("abcdef")
        cursor.position = 3
        assert cursor.current() == "d"
        assert cursor.peek_behind(2) == "b"
        assert cursor.remaining() == "ef"

    def test_remaining_and_at_end(self):
        cursor = Cursor("ab")
        assert cursor.remaining() == "ab"
        assert not cursor.at_end()
        cursor.advance(2)
        assert cursor.remaining() == ""
        assert cursor.at_end()
