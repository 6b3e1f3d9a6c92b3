"""Single-pass parser for resume-lang documents.

Grammar (informal, line oriented):
    document  = (section | label | text | import | "end")*
    section   = "section" ID NEWLINE document "end"
    label     = "label" LITERAL ":" LITERAL NEWLINE
    text      = "text" LITERAL ":" BODY NEWLINE "end"
    import    = "@import" '"' PATH '"' NEWLINE

Anything between constructs that is not a keyword is ignored. Closing more
blocks than were opened is harmless: `end` at the top level does nothing.

Example:
    section Basic
        label Name: "Siddharth Gelera"
        label Website: url https://reaper.is
        label Born: date 1998-07-14
        text About:
        Writes *software*.
        end
    end
"""

import logging
from enum import Enum, auto
from pathlib import Path

from .ast import AST, LabelValue, Node, RichTextValue, TextValue, attach
from .config import ParserOptions
from .cursor import Cursor
from .errors import ResumeParseError
from .imports import ImportResolver, join_path, normalize_import_path, read_text_file
from .scanner import find_text_block_end
from .transforms import run_transforms

logger = logging.getLogger(__name__)

KEYWORDS = frozenset({"section", "text", "end", "label", "url", "date", "@import"})


class State(Enum):
    ROOT = auto()  # insertion pointer is the root
    IN_SECTION = auto()  # insertion pointer is an open section
    IN_SECTION_ID = auto()
    IN_LABEL_ID = auto()
    IN_LABEL_VALUE = auto()
    IN_TEXT_ID = auto()
    IN_TEXT_BODY = auto()
    IN_IMPORT = auto()


class Builder:
    """Character-level state machine that builds the AST.

    Between constructs (ROOT / IN_SECTION) non-whitespace characters collect
    into a word until it spells a keyword. A keyword switches to a header
    state that buffers characters up to its stop character, then the
    construct is emitted and the builder falls back to the block state.
    """

    # Character that completes each header state
    STOPS = {
        State.IN_SECTION_ID: "\n",
        State.IN_LABEL_ID: ":",
        State.IN_LABEL_VALUE: "\n",
        State.IN_TEXT_ID: ":",
        State.IN_IMPORT: "\n",
    }

    def __init__(
        self,
        source: str,
        options: ParserOptions | None = None,
        imported: frozenset[str] = frozenset(),
    ):
        self.cursor = Cursor(source)
        self.options = options or ParserOptions()
        self.imported = imported
        self.resolver = ImportResolver(self.options, imported)
        self.ast = AST()
        self.stack: list[AST | Node] = [self.ast]
        self._word = ""
        self._buffer: list[str] = []
        self._header: State | None = None
        self._label_id = ""

    @property
    def pointer(self) -> AST | Node:
        """Node new constructs are appended to."""
        return self.stack[-1]

    @property
    def state(self) -> State:
        if self._header is not None:
            return self._header
        return State.ROOT if len(self.stack) == 1 else State.IN_SECTION

    def build(self) -> AST:
        """Run the whole document. Returns the partial tree on error unless strict."""
        try:
            self._run()
        except ResumeParseError as exc:
            if self.options.strict:
                raise
            logger.warning("Stopped parsing early, returning partial tree: %s", exc)
        return self.ast

    def _run(self) -> None:
        while (char := self.cursor.advance()) is not None:
            if self._header is None:
                self._collect(char)
            elif char == self.STOPS[self._header]:
                self._complete(self._header)
            else:
                self._buffer.append(char)

        # End of input completes whatever header was still open
        while self._header is not None:
            self._complete(self._header)

    def _collect(self, char: str) -> None:
        if char.isspace():
            return
        self._word += char
        if self._word in KEYWORDS:
            keyword, self._word = self._word, ""
            self._dispatch(keyword)

    def _dispatch(self, keyword: str) -> None:
        if keyword == "section":
            self._header = State.IN_SECTION_ID
        elif keyword == "label":
            self._header = State.IN_LABEL_ID
        elif keyword == "text":
            self._header = State.IN_TEXT_ID
        elif keyword == "@import":
            self._header = State.IN_IMPORT
        elif keyword == "end":
            self._close_block()
        # `url` and `date` only mean something inside a label value

    def _take_buffer(self) -> str:
        text = "".join(self._buffer)
        self._buffer.clear()
        return text

    def _complete(self, state: State) -> None:
        text = self._take_buffer()

        if state == State.IN_SECTION_ID:
            self._header = None
            self._open_section(text.strip())
        elif state == State.IN_LABEL_ID:
            self._label_id = text
            self._header = State.IN_LABEL_VALUE
        elif state == State.IN_LABEL_VALUE:
            self._header = None
            self._add_label(self._label_id, text)
        elif state == State.IN_TEXT_ID:
            self._read_text_block(text)
        elif state == State.IN_IMPORT:
            self._import(text)
            self._header = None

    def _transform(self, literal: str) -> str | Node:
        return run_transforms(literal, self.options.transforms)

    def _open_section(self, section_id: str) -> None:
        node = attach(self.pointer, Node(type="section", value=section_id))
        self.stack.append(node)

    def _close_block(self) -> None:
        if len(self.stack) > 1:
            self.stack.pop()

    def _add_label(self, raw_id: str, raw_value: str) -> None:
        value = self._transform(raw_value)
        if isinstance(value, str):
            value = TextValue(value=value)
        label = LabelValue(id=self._transform(raw_id), value=value)
        attach(self.pointer, Node(type="label", value=label))

    def _read_text_block(self, raw_id: str) -> None:
        self._header = State.IN_TEXT_BODY
        start = self.cursor.position
        found = find_text_block_end(self.cursor.remaining())
        if not found.terminated:
            logger.debug("Unterminated text block %r runs to end of input", raw_id.strip())
        self.cursor.position = start + found.consumed

        rich_text = RichTextValue(
            id=self._transform(raw_id),
            original=found.body.strip(),
            transformed=self.options.render_markup(found.body),
        )
        attach(self.pointer, Node(type="rich-text", value=rich_text))
        self._header = None

    def _import(self, directive: str) -> None:
        resolved = self.resolver.resolve(directive)
        tree = Builder(resolved.source, self.options, self.imported | {resolved.path}).build()
        for child in list(tree.children):
            attach(self.pointer, child)


def parse(source: str, options: ParserOptions | None = None, **overrides) -> AST:
    """Parse resume-lang source into an AST.

    Keyword overrides are applied on top of `options`:

        parse(code, root_dir="./cv", read_file=reader, strict=True)
    """
    if options is None:
        options = ParserOptions(**overrides)
    elif overrides:
        options = options.model_copy(update=overrides)
    return Builder(source, options).build()


def parse_file(filepath: str | Path, options: ParserOptions | None = None) -> AST:
    """Parse a .resume file, resolving imports relative to its directory."""
    filepath = Path(filepath)
    source = filepath.read_text(encoding="utf-8")
    if options is None:
        options = ParserOptions(root_dir=str(filepath.parent), read_file=read_text_file)

    own_path = join_path(options.root_dir, normalize_import_path(filepath.name))
    return Builder(source, options, frozenset({own_path})).build()
