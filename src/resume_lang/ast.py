"""AST nodes for resume-lang documents."""

from datetime import datetime
from typing import Any
from typing import Literal as TypingLiteral

from pydantic import BaseModel, PrivateAttr


# Payloads carried in Node.value
class TextValue(BaseModel):
    """Label value that stayed a plain string after the transform pipeline."""

    type: TypingLiteral["text"] = "text"
    value: str


class UrlValue(BaseModel):
    alias: str
    link: str


class LabelValue(BaseModel):
    """Payload of a `label id: value` line."""

    id: "str | Node"
    value: "Node | TextValue"


class RichTextValue(BaseModel):
    """Payload of a `text id: ... end` block."""

    id: "str | Node"
    original: str  # trimmed source body
    transformed: str  # rendered markup


class Node(BaseModel):
    """A single element of the document tree.

    `type` is one of section, label, rich-text, date or url and decides the
    shape of `value`:

        section    -> str (the section id)
        label      -> LabelValue
        rich-text  -> RichTextValue
        url        -> UrlValue
        date       -> datetime

    The parent back-reference is a private attribute, so it never shows up in
    `model_dump()` and the tree always serializes without cycles.
    """

    type: str
    value: str | datetime | UrlValue | LabelValue | RichTextValue | None = None
    children: list["Node"] = []

    _parent: Any = PrivateAttr(default=None)

    @property
    def parent(self) -> "Node | AST | None":
        return self._parent


class AST(BaseModel):
    """Root of a parsed document. Never has a parent."""

    type: TypingLiteral["root"] = "root"
    children: list[Node] = []

    @property
    def parent(self) -> None:
        return None


def attach(parent: "AST | Node", child: Node) -> Node:
    """Append `child` to `parent` and point its back-reference at `parent`."""
    child._parent = parent
    parent.children.append(child)
    return child


def walk(tree: "AST | Node"):
    """Yield every node below `tree` in document order."""
    for child in tree.children:
        yield child
        yield from walk(child)


# Rebuild models for forward references
LabelValue.model_rebuild()
RichTextValue.model_rebuild()
Node.model_rebuild()
AST.model_rebuild()
