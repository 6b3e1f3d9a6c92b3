"""resume-lang: parse resume markup into a tree of typed nodes.

Pipeline: characters -> keyword state machine -> literal transforms -> AST.

Example:
    from resume_lang import parse, to_json

    ast = parse(open("cv.resume").read(), root_dir="./cv", read_file=my_reader)
    print(to_json(ast))
"""

__version__ = "0.3.0"

from .ast import AST, LabelValue, Node, RichTextValue, TextValue, UrlValue, attach, walk
from .config import DEFAULT_ROOT_DIR, RESUME_SUFFIX, ParserOptions
from .cursor import Cursor
from .errors import (
    ImportCycleError,
    ImportReadFailure,
    MalformedImportDirective,
    ResumeParseError,
)
from .imports import ImportResolver, join_path, normalize_import_path
from .markup import render_markdown
from .parser import KEYWORDS, Builder, State, parse, parse_file
from .scanner import TextBlockEnd, find_text_block_end
from .serialize import to_dict, to_json, to_source
from .transforms import (
    DEFAULT_TRANSFORMS,
    run_transforms,
    split_quoted,
    transform_date,
    transform_url,
    unwrap_quoted,
)

__all__ = [
    # Parse
    "parse",
    "parse_file",
    "Builder",
    "State",
    "KEYWORDS",
    "ParserOptions",
    "DEFAULT_ROOT_DIR",
    "RESUME_SUFFIX",
    # Errors
    "ResumeParseError",
    "MalformedImportDirective",
    "ImportReadFailure",
    "ImportCycleError",
    # AST
    "AST",
    "Node",
    "LabelValue",
    "RichTextValue",
    "TextValue",
    "UrlValue",
    "attach",
    "walk",
    # Scanning
    "Cursor",
    "TextBlockEnd",
    "find_text_block_end",
    # Transforms
    "DEFAULT_TRANSFORMS",
    "run_transforms",
    "unwrap_quoted",
    "transform_date",
    "transform_url",
    "split_quoted",
    # Imports
    "ImportResolver",
    "join_path",
    "normalize_import_path",
    # Output
    "render_markdown",
    "to_dict",
    "to_json",
    "to_source",
]
