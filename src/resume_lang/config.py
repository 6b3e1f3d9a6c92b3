"""Parser options.

Every `parse()` call takes its collaborators explicitly. Nothing is read from
the environment and nothing is shared between calls.
"""

import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from .markup import render_markdown
from .transforms import DEFAULT_TRANSFORMS, Transform

DEFAULT_ROOT_DIR = "."
RESUME_SUFFIX = ".resume"

logger = logging.getLogger(__name__)


def empty_document(path: str) -> str:
    """Default reader: every import resolves to an empty document."""
    logger.debug("No read_file configured, import %s resolves to an empty document", path)
    return ""


class ParserOptions(BaseModel):
    """Collaborators and policy for a single parse.

    root_dir:       base directory `@import` targets are joined onto
    read_file:      synchronous `path -> source` provider for imports
    render_markup:  `text -> html` renderer applied to each text block body
    strict:         raise ResumeParseError instead of returning the partial tree
    transforms:     literal transform pipeline, applied in order
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    root_dir: str = DEFAULT_ROOT_DIR
    read_file: Callable[[str], str] = empty_document
    render_markup: Callable[[str], str] = render_markdown
    strict: bool = False
    transforms: tuple[Transform, ...] = DEFAULT_TRANSFORMS
