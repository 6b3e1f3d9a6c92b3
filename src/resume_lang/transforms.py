"""Literal transform pipeline.

A raw literal (label ids, label values, text block ids) runs through an
ordered tuple of transforms. Each transform takes a string and returns
either a string, which the next transform sees, or a typed Node, which ends
the pipeline:

    '"Siddharth"'              -> 'Siddharth'
    'date 2013-06-01'          -> Node(type="date", value=datetime(2013, 6, 1))
    'url "Home" https://x.io'  -> Node(type="url", value=UrlValue(alias="Home", link="https://x.io"))
"""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime

from dateutil import parser as dateparser

from .ast import Node, UrlValue
from .cursor import Cursor

logger = logging.getLogger(__name__)

Transform = Callable[[str], str | Node]

# Fields a date literal leaves out ("Jan 2020", "2020") fall back to these.
DATE_DEFAULT = datetime(1970, 1, 1)


def strip_keyword(literal: str, keyword: str) -> str | None:
    """Return what follows `keyword` if `literal` starts with it as a word."""
    trimmed = literal.strip()
    if trimmed == keyword:
        return ""
    if trimmed.startswith(keyword) and trimmed[len(keyword)].isspace():
        return trimmed[len(keyword) :].strip()
    return None


def unwrap_quoted(literal: str) -> str:
    """Strip one pair of surrounding double quotes; always returns trimmed text."""
    trimmed = literal.strip()
    if len(trimmed) >= 2 and trimmed.startswith('"') and trimmed.endswith('"'):
        return trimmed[1:-1]
    return trimmed


def transform_date(literal: str) -> "str | Node":
    rest = strip_keyword(literal, "date")
    if rest is None:
        return literal
    try:
        instant = dateparser.parse(rest, default=DATE_DEFAULT)
    except (ValueError, OverflowError):
        logger.debug("Not a date literal, keeping as text: %r", literal)
        return literal
    return Node(type="date", value=instant)


def split_quoted(text: str) -> list[str]:
    """Split on whitespace, except inside double quotes.

    >>> split_quoted('"My Site" https://x.io')
    ['My Site', 'https://x.io']
    """
    segments: list[str] = []
    collector: list[str] = []
    quoted = False
    cursor = Cursor(text)

    while (char := cursor.advance()) is not None:
        if char == '"':
            if collector:
                segments.append("".join(collector))
                collector.clear()
            quoted = not quoted
            continue
        if char.isspace() and not quoted:
            if collector:
                segments.append("".join(collector))
                collector.clear()
            continue
        collector.append(char)

    if collector:
        segments.append("".join(collector))
    return [segment.strip() for segment in segments if segment.strip()]


def transform_url(literal: str) -> "str | Node":
    rest = strip_keyword(literal, "url")
    if rest is None:
        return literal

    segments = split_quoted(rest)
    if len(segments) == 2:
        alias, link = segments
    elif len(segments) == 1:
        alias = link = segments[0]
    else:
        return literal
    return Node(type="url", value=UrlValue(alias=alias, link=link))


DEFAULT_TRANSFORMS: tuple[Transform, ...] = (unwrap_quoted, transform_date, transform_url)


def run_transforms(
    literal: "str | Node", transforms: Iterable[Transform] = DEFAULT_TRANSFORMS
) -> "str | Node":
    """Apply `transforms` in order until one produces a typed Node."""
    result = literal
    for transform in transforms:
        if isinstance(result, Node):
            break
        result = transform(result)
    return result
