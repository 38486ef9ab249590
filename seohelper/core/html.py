"""
HTML fragment helpers for SEO tags.

Key behaviors:
- Builds <title>, <meta name content> and <link rel href> tags
- Escapes text and attribute values
- Applies soft length limits to text before rendering
- Pure functions: same inputs always produce same outputs
"""

from __future__ import annotations

import html
from dataclasses import dataclass

ELLIPSIS = "..."


@dataclass(frozen=True)
class MetaTag:
    """HTML meta tag representation."""

    name: str
    content: str = ""

    def render(self) -> str:
        """Render as a meta tag, or an empty string when content is empty."""
        return render_meta_tag(self.name, self.content)


def render_meta_tag(name: str, content: str) -> str:
    """Render `<meta name="..." content="...">`, skipping empty content."""
    if not content:
        return ""
    return f'<meta name="{html.escape(name)}" content="{html.escape(content)}">'


def render_title_tag(text: str) -> str:
    """Render `<title>...</title>`, skipping empty text."""
    if not text:
        return ""
    return f"<title>{html.escape(text, quote=False)}</title>"


def render_link_tag(rel: str, href: str) -> str:
    """Render `<link rel="..." href="...">`, skipping an empty href."""
    if not href:
        return ""
    return f'<link rel="{html.escape(rel)}" href="{html.escape(href)}">'


# --- Length Limiting ---


def limit_text(text: str, max_length: int | None, end: str = ELLIPSIS) -> str:
    """
    Limit text to max_length characters, ending marker included.

    Breaks at a word boundary when one falls in the last 40% of the kept text.
    A max_length of None disables the limit.
    """
    if max_length is None or len(text) <= max_length:
        return text

    if max_length <= len(end):
        return text[:max_length]

    truncated = text[: max_length - len(end)]
    last_space = truncated.rfind(" ")

    if last_space > len(truncated) * 0.6:
        truncated = truncated[:last_space]

    return truncated.rstrip() + end
