"""Fetch and parse notices from the Ajou media department notice board."""

from __future__ import annotations

import logging
import re
import warnings
from dataclasses import dataclass
from html import escape
from typing import Callable, Dict, List, Optional

import requests
import urllib3
from bs4 import BeautifulSoup, Tag

from .config import Settings
from .models import PINNED_INDEX, Notice

LOGGER = logging.getLogger(__name__)

ROW_SELECTOR = "table.board-table > tbody > tr"
TITLE_SELECTOR = "td.b-td-left > div.b-title-box > a"
INDEX_PATTERN = re.compile(r"[0-9]+")
MAX_INDEX = 2**31 - 1


def fetch_html(
    base_url: str,
    limit: int,
    offset: int,
    *,
    user_agent: str = "Mozilla/5.0",
    timeout: Optional[float] = None,
) -> str:
    """Retrieve one page of the notice list.

    Certificate validation is disabled; the board server's certificate
    chain does not validate.
    """
    params = {
        "mode": "list",
        "articleLimit": limit,
        "article.offset": offset,
    }
    headers = {"User-Agent": user_agent}

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", urllib3.exceptions.InsecureRequestWarning)
        response = requests.get(
            base_url, params=params, headers=headers, timeout=timeout, verify=False
        )
    response.raise_for_status()

    # charset 헤더가 없으면 requests가 ISO-8859-1로 가정함
    if not response.encoding or response.encoding.lower() == "iso-8859-1":
        response.encoding = response.apparent_encoding or "utf-8"
    return response.text


def _select_text(row: Tag, selector: str) -> str:
    """Join the trimmed, non-empty text fragments of every matching element."""
    fragments = (
        text.strip().replace("\n", "").replace("\t", "")
        for element in row.select(selector)
        for text in element.strings
    )
    return " ".join(fragment for fragment in fragments if fragment)


def _select_href(row: Tag, selector: str) -> str:
    for element in row.select(selector):
        href = element.get("href")
        if href is not None:
            return href
    return ""


def _escape(value: str) -> str:
    # &, <, >, ", ' 모두 엔티티로 변환
    return escape(value)


def _to_index(text: str) -> int:
    if INDEX_PATTERN.fullmatch(text):
        value = int(text)
        if value <= MAX_INDEX:
            return value
    return PINNED_INDEX


@dataclass(frozen=True)
class FieldRule:
    """How one Notice field is pulled out of a board row."""

    name: str
    selector: str
    extract: Callable[[Tag, str], str]
    convert: Callable[[str], object]
    # 링크는 base_url 뒤에 그대로 이어 붙임 (urljoin 사용하지 않음)
    prefix_base_url: bool = False

    def apply(self, row: Tag, base_url: str):
        value = self.extract(row, self.selector)
        if self.prefix_base_url:
            value = f"{base_url}{value}"
        return self.convert(value)


FIELD_RULES = (
    FieldRule("index", "td.b-num-box", _select_text, _to_index),
    FieldRule("category", "td.b-num-box + td", _select_text, _escape),
    FieldRule("title", TITLE_SELECTOR, _select_text, _escape),
    FieldRule("link", TITLE_SELECTOR, _select_href, _escape, prefix_base_url=True),
    FieldRule("author", "td.b-no-right + td", _select_text, _escape),
    FieldRule("expired_at", "td.b-no-right + td + td", _select_text, _escape),
)


def _parse_row(row: Tag, base_url: str) -> Notice:
    fields: Dict[str, object] = {
        rule.name: rule.apply(row, base_url) for rule in FIELD_RULES
    }
    return Notice(**fields)


def parse_notices(html: str, base_url: str) -> List[Notice]:
    """Parse board rows into Notice objects, in document order.

    A field whose selector matches nothing degrades to an empty string
    (or the pinned index) instead of failing the row.
    """
    soup = BeautifulSoup(html, "html.parser")
    rows = soup.select(ROW_SELECTOR)
    if not rows:
        LOGGER.warning("No rows matched %r in the board HTML.", ROW_SELECTOR)
        return []

    notices = [_parse_row(row, base_url) for row in rows]
    for notice in notices:
        LOGGER.debug("Parsed notice %d: %s", notice.index, notice.title)
    return notices


def get_latest_notices(settings: Settings) -> List[Notice]:
    """Fetch and parse the first page of the notice list."""
    html = fetch_html(
        settings.board_url,
        settings.article_limit,
        settings.article_offset,
        user_agent=settings.user_agent,
        timeout=settings.request_timeout,
    )
    return parse_notices(html, settings.board_url)
