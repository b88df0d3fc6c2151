# ajou_notice_feed/renderer.py
"""Render parsed notices as RSS, Markdown or a commit message.

Notice fields arrive already HTML-escaped from the crawler, so nothing here
escapes them again.
"""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional, Sequence

from .config import Settings
from .models import Notice

MODES = ("xml", "md", "cm")
PIN_MARKER = "📌"

# Markdown 구분자는 실제 줄바꿈이 아니라 문자 그대로의 "\n"
MD_NEWLINE = r"\n"


class UnknownModeError(ValueError):
    """Raised when the requested output mode has no renderer."""

    def __init__(self, mode: str):
        super().__init__(f"unknown mode '{mode}'")
        self.mode = mode


def compose_xml(
    notices: Sequence[Notice],
    *,
    title: str,
    link: str,
    description: str,
    language: str,
    now: Optional[datetime] = None,
) -> str:
    """Build an RSS 2.0 document with one <item> per notice."""
    build_date = format_datetime(now or datetime.now(timezone.utc))
    header = "\n ".join(
        [
            '<rss version="2.0">',
            "<channel>",
            f"<title>{title}</title>",
            f"<link>{link}</link>",
            f"<description>{description}</description>",
            f"<language>{language}</language>",
            f"<lastBuildDate>{build_date}</lastBuildDate>",
        ]
    )
    footer = "</channel>\n </rss>"

    items = "\n".join(
        "\n ".join(
            [
                "<item>",
                f"<title>{notice.title}</title>",
                f"<link>{notice.link}</link>",
                f"<description>{notice.description}</description>",
                "</item>",
            ]
        )
        for notice in notices
    )
    return f"{header}\n{items}\n{footer}"


def compose_md(notices: Sequence[Notice], *, header: str) -> str:
    """Build a Markdown digest; pinned notices get a pin marker."""
    items = []
    for notice in notices:
        title = f"{PIN_MARKER} {notice.title}" if notice.is_pinned else notice.title
        items.append(
            f"* **[{title}]({notice.link})**{MD_NEWLINE}  {notice.description}"
        )

    separator = MD_NEWLINE * 2
    return f"{header}{separator}{separator.join(items)}"


def compose_commit_message(notices: Sequence[Notice], new_count: int) -> str:
    header = f"dist: {new_count}개의 새 공지사항"
    items = "\n".join(f"* {notice.title}" for notice in notices)
    return f"{header}\n\n{items}"


def render(
    mode: str,
    notices: Sequence[Notice],
    new_count: int,
    settings: Settings,
    *,
    now: Optional[datetime] = None,
) -> str:
    """Dispatch to the renderer for ``mode``, raising UnknownModeError otherwise."""
    if mode == "xml":
        return compose_xml(
            notices,
            title=settings.feed_title,
            link=settings.feed_link,
            description=settings.feed_description,
            language=settings.feed_language,
            now=now,
        )
    if mode == "md":
        return compose_md(notices, header=settings.markdown_header)
    if mode == "cm":
        return compose_commit_message(notices, new_count)
    raise UnknownModeError(mode)
