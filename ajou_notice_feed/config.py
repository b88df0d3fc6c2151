"""Configuration handling for the notice feed."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


DEFAULT_BOARD_URL = "http://media.ajou.ac.kr/media/board/notice.do"
DEFAULT_ARTICLE_LIMIT = 30
DEFAULT_ARTICLE_OFFSET = 0
DEFAULT_USER_AGENT = "Mozilla/5.0"

DEFAULT_FEED_TITLE = "Ajou University Department of Digital Media Notices"
DEFAULT_FEED_LINK = "https://media.ajou.ac.kr/media/board/board01.jsp"
DEFAULT_FEED_DESCRIPTION = "Recently published notices"
DEFAULT_FEED_LANGUAGE = "ko-kr"
DEFAULT_MARKDOWN_HEADER = "# 미디어학과 최근 공지사항"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    board_url: str = DEFAULT_BOARD_URL
    article_limit: int = DEFAULT_ARTICLE_LIMIT
    article_offset: int = DEFAULT_ARTICLE_OFFSET
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: Optional[float] = None
    last_index_path: Optional[str] = None
    feed_title: str = DEFAULT_FEED_TITLE
    feed_link: str = DEFAULT_FEED_LINK
    feed_description: str = DEFAULT_FEED_DESCRIPTION
    feed_language: str = DEFAULT_FEED_LANGUAGE
    markdown_header: str = DEFAULT_MARKDOWN_HEADER


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc


def get_settings() -> Settings:
    """Load settings from environment variables (and a local .env file)."""
    load_dotenv()

    timeout_raw = os.getenv("REQUEST_TIMEOUT", "").strip()
    timeout = None
    if timeout_raw:
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise ValueError("REQUEST_TIMEOUT must be a number") from exc

    # 비어 있으면 실행 파일 옆의 last_index 사용
    last_index_path = os.getenv("LAST_INDEX_PATH", "").strip() or None

    return Settings(
        board_url=os.getenv("BOARD_URL", DEFAULT_BOARD_URL).strip(),
        article_limit=_get_int("ARTICLE_LIMIT", DEFAULT_ARTICLE_LIMIT),
        article_offset=_get_int("ARTICLE_OFFSET", DEFAULT_ARTICLE_OFFSET),
        user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
        request_timeout=timeout,
        last_index_path=last_index_path,
        feed_title=os.getenv("FEED_TITLE", DEFAULT_FEED_TITLE),
        feed_link=os.getenv("FEED_LINK", DEFAULT_FEED_LINK),
        feed_description=os.getenv("FEED_DESCRIPTION", DEFAULT_FEED_DESCRIPTION),
        feed_language=os.getenv("FEED_LANGUAGE", DEFAULT_FEED_LANGUAGE),
        markdown_header=os.getenv("MARKDOWN_HEADER", DEFAULT_MARKDOWN_HEADER),
    )
