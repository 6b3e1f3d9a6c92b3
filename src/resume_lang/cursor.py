"""Character cursor used by the builder and the url splitter."""


class Cursor:
    """Random-access walk over the characters of a string.

    The position starts one before the first character, so the first
    `advance()` returns `source[0]`. Reads outside the string return None
    instead of raising, which lets `while (char := cursor.advance())` loops
    stop on their own at end of input.
    """

    def __init__(self, source: str):
        self.source = source
        self.position = -1

    def _at(self, index: int) -> str | None:
        if 0 <= index < len(self.source):
            return self.source[index]
        return None

    def current(self) -> str | None:
        return self._at(self.position)

    def advance(self, count: int = 1) -> str | None:
        self.position += count
        return self._at(self.position)

    def retreat(self, count: int = 1) -> str | None:
        self.position -= count
        return self._at(self.position)

    def peek_ahead(self, count: int = 1) -> str | None:
        return self._at(self.position + count)

    def peek_behind(self, count: int = 1) -> str | None:
        return self._at(self.position - count)

    def remaining(self) -> str:
        """Everything after the current position, without moving."""
        return self.source[max(self.position + 1, 0) :]

    def at_end(self) -> bool:
        return self.position >= len(self.source) - 1
