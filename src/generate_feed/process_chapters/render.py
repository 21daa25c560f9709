"""Markdown to HTML rendering for feed item bodies."""

import markdown

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


def render_html(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
