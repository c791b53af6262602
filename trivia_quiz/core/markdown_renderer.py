"""Markdown rendering helpers shared by the Qt results page and the web API.

Reports are assembled as markdown and converted to HTML with markdown-it, so
the desktop results view and the browser leaderboard page share one layout.
Trivia text comes from a third party; it is escaped before it is embedded in
markdown and raw HTML is disabled in the parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re

from markdown_it import MarkdownIt

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~])")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters markdown would otherwise interpret."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable("table")

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_document(self, body_html: str, title: str = "Trivia Quiz") -> str:
        return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0 auto; padding: 1rem; max-width: 48rem; }}
      table {{ border-collapse: collapse; width: 100%; }}
      th, td {{ border-bottom: 1px solid #ddd; padding: 0.4rem; text-align: left; }}
    </style>
  </head>
  <body>
{body_html}
  </body>
</html>"""

    def render_full_document(self, markdown_text: str, title: str = "Trivia Quiz") -> str:
        return self.wrap_document(self.render_fragment(markdown_text), title=title)


renderer = MarkdownRenderer()
