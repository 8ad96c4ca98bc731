"""Markdown rendering for comment text."""

import logfire
from markdown_it import MarkdownIt

from meh.domain.service.comment_service import Renderer


class MarkdownRenderer(Renderer):
    """CommonMark renderer with raw HTML disabled.

    Any HTML typed by a commenter is escaped, so the output is safe to embed
    in the blog page. Single newlines become line breaks, which is what
    people expect when typing into a comment box.
    """

    def __init__(self) -> None:
        self.md = MarkdownIt("commonmark", {"html": False, "breaks": True})
        # Images in comments are a tracking and abuse vector
        self.md.disable("image")

    def render(self, text: str) -> str:
        """Render Markdown to HTML."""
        html = self.md.render(text).strip()
        logfire.debug("Rendered comment markup", length=len(html))
        return html
