"""Terminator scanner for free-form `text` blocks.

A text body is prose and may contain the word "end" anywhere ("...the
project came to an end"). Only a line whose whole trimmed content is `end`
closes the block, and recognising that needs the entire line, not one
character of lookahead. So the builder hands over everything left in the
document, this module finds the terminator line, and the builder rewinds its
cursor to just after it.
"""

from dataclasses import dataclass

TERMINATOR = "end"


@dataclass(frozen=True)
class TextBlockEnd:
    body: str  # text before the terminator line, trailing whitespace removed
    consumed: int  # offset just past the terminator's `end` token
    terminated: bool  # False when the body runs to end of input


def find_text_block_end(buffer: str) -> TextBlockEnd:
    """Locate the first line after a newline in `buffer` that reads `end`."""
    newline = buffer.find("\n")
    while newline != -1:
        line_start = newline + 1
        line_end = buffer.find("\n", line_start)
        if line_end == -1:
            line_end = len(buffer)

        line = buffer[line_start:line_end]
        if line.strip() == TERMINATOR:
            token_end = line_start + line.index(TERMINATOR) + len(TERMINATOR)
            return TextBlockEnd(
                body=buffer[:newline].rstrip(), consumed=token_end, terminated=True
            )
        newline = buffer.find("\n", line_start)

    return TextBlockEnd(body=buffer.rstrip(), consumed=len(buffer), terminated=False)
