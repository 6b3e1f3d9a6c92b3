"""Serialize an AST to plain data, JSON, or back to resume-lang source."""

from datetime import datetime, time

from .ast import AST, LabelValue, Node, RichTextValue, TextValue, UrlValue
from .scanner import TERMINATOR

INDENT = "  "


def to_dict(ast: AST | Node) -> dict:
    """JSON-compatible dict of the tree; dates become ISO strings."""
    return ast.model_dump(mode="json")


def to_json(ast: AST | Node, indent: int | None = 2) -> str:
    return ast.model_dump_json(indent=indent)


def _needs_quotes(text: str) -> bool:
    if text != text.strip():
        return True
    if text.startswith('"') and text.endswith('"') and len(text) >= 2:
        return True
    first = text.split(None, 1)[0] if text.strip() else ""
    return first in ("date", "url")


def _literal(value: "str | Node | TextValue") -> str:
    if isinstance(value, TextValue):
        value = value.value
    if isinstance(value, Node):
        return _typed_literal(value)
    return f'"{value}"' if _needs_quotes(value) else value


def _url_part(text: str) -> str:
    return f'"{text}"' if not text or any(c.isspace() for c in text) else text


def _date_literal(instant: datetime) -> str:
    """Colon-free date text; ids are read only up to the first `:`.

    Midnight renders as `2020-01-01`, anything else as `2020-01-01 103000`
    (plus `.ffffff` and a `+hhmm` offset when present), all of which
    dateutil reads back to the same instant.
    """
    text = instant.date().isoformat()
    if instant.time() == time() and instant.tzinfo is None:
        return text
    text += instant.strftime(" %H%M%S")
    if instant.microsecond:
        text += f".{instant.microsecond:06d}"
    if instant.tzinfo is not None:
        text += instant.strftime("%z")
    return text


def _typed_literal(node: Node) -> str:
    if node.type == "date":
        return f"date {_date_literal(node.value)}"
    if node.type == "url" and isinstance(node.value, UrlValue):
        if node.value.alias == node.value.link:
            return f"url {_url_part(node.value.link)}"
        return f"url {_url_part(node.value.alias)} {_url_part(node.value.link)}"
    raise ValueError(f"cannot render {node.type!r} node as a literal")


def _render(node: Node, depth: int, lines: list[str]) -> None:
    pad = INDENT * depth
    if node.type == "section":
        lines.append(f"{pad}section {node.value}")
        for child in node.children:
            _render(child, depth + 1, lines)
        lines.append(f"{pad}end")
    elif node.type == "label" and isinstance(node.value, LabelValue):
        lines.append(f"{pad}label {_literal(node.value.id)}:{_literal(node.value.value)}")
    elif node.type == "rich-text" and isinstance(node.value, RichTextValue):
        # Body lines are kept verbatim so `original` survives a round trip
        lines.append(f"{pad}text {_literal(node.value.id)}:")
        lines.extend(node.value.original.split("\n"))
        lines.append(f"{pad}{TERMINATOR}")
    else:
        raise ValueError(f"cannot render {node.type!r} node as a statement")


def to_source(ast: AST) -> str:
    """Render the tree back into resume-lang source.

    Parsing the result again yields the same sections, labels and text blocks.
    """
    lines: list[str] = []
    for child in ast.children:
        _render(child, 0, lines)
    return "\n".join(lines) + "\n"
