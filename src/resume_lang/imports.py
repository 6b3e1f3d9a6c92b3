"""`@import` resolution.

    @import "./experience"

reads `<root_dir>/experience.resume` through the injected reader. The
builder parses the returned source and splices its top-level nodes into the
importing scope.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from .config import RESUME_SUFFIX, ParserOptions
from .errors import ImportCycleError, ImportReadFailure, MalformedImportDirective
from .transforms import unwrap_quoted

logger = logging.getLogger(__name__)


def normalize_import_path(path: str) -> str:
    """Ensure exactly one trailing `.resume` suffix."""
    if path.endswith(RESUME_SUFFIX):
        path = path[: -len(RESUME_SUFFIX)]
    return path + RESUME_SUFFIX


def join_path(*segments: str) -> str:
    """Join with `/`, collapsing repeated `./` and interior `/./` segments."""
    if any(segment is None for segment in segments):
        raise ValueError("path segments cannot be None")
    joined = "/".join(segments)
    joined = re.sub(r"(?:\./)+", "./", joined)
    return re.sub(r"/(?:\./)+", "/", joined)


def read_text_file(path: str) -> str:
    """Filesystem reader used by `parse_file`."""
    return Path(path).read_text(encoding="utf-8")


@dataclass(frozen=True)
class ResolvedImport:
    path: str
    source: str


class ImportResolver:
    """Turns a raw `@import` directive into the imported document's source."""

    def __init__(self, options: ParserOptions, seen: frozenset[str] = frozenset()):
        self.options = options
        self.seen = seen

    def target(self, directive: str) -> str:
        """Validate the directive and return the path handed to the reader."""
        if not directive.strip().startswith('"'):
            raise MalformedImportDirective(
                f"@import target must be wrapped in double quotes, got {directive.strip()!r}"
            )
        path = normalize_import_path(unwrap_quoted(directive))
        return join_path(self.options.root_dir, path)

    def resolve(self, directive: str) -> ResolvedImport:
        path = self.target(directive)
        if path in self.seen:
            raise ImportCycleError(path)

        logger.debug("Reading import %s", path)
        try:
            source = self.options.read_file(path)
        except Exception as exc:
            raise ImportReadFailure(path) from exc
        return ResolvedImport(path=path, source=source)
