"""Default markup renderer for `text` block bodies."""

import markdown

MARKDOWN_EXTENSIONS = ["tables", "fenced_code"]


def render_markdown(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
