"""
Listing-page scraper: turns the rendered news?p=N HTML into PageStoryRaw rows.

Each story is a `tr.athing` row (rank, title link) followed by a sibling row
holding the subtext (points, author, comment link). Counters go through the
fixed "N.", "N points" and "N comments" patterns; anything else reads as 0
and is left for the validator to reject.
"""
from __future__ import annotations
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .models import PageStoryRaw
from .utils import COMMENTS_RE, POINTS_RE, RANK_RE, count_by_regex

ITEM_SELECTOR = "tr.athing"
TITLE_SELECTOR = "span.titleline > a, a.storylink"
RANK_SELECTOR = "span.rank"
AUTHOR_SELECTOR = "a.hnuser"
POINTS_SELECTOR = "span.score"
SUBTEXT_LINKS_SELECTOR = "td.subtext a"
MORE_SELECTOR = "a.morelink"

def _text(node: Optional[Tag]) -> str:
    return node.get_text(strip=True) if node is not None else ""

def parse_row(row: Tag) -> PageStoryRaw:
    link = row.select_one(TITLE_SELECTOR)
    sub = row.find_next_sibling("tr")
    if sub is not None and "athing" in (sub.get("class") or []):
        sub = None  # no subtext row

    # comment count is the last subtext link ("12 comments" or "discuss")
    sub_links = sub.select(SUBTEXT_LINKS_SELECTOR) if sub is not None else []
    comments_text = sub_links[-1].get_text(strip=True) if sub_links else ""

    return {
        "title": _text(link),
        "uri": link.get("href") if link is not None else None,
        "author": _text(sub.select_one(AUTHOR_SELECTOR)) if sub is not None else "",
        "rank": count_by_regex(_text(row.select_one(RANK_SELECTOR)), RANK_RE),
        "points": count_by_regex(_text(sub.select_one(POINTS_SELECTOR)) if sub is not None else "", POINTS_RE),
        "comments": count_by_regex(comments_text, COMMENTS_RE),
    }

def parse_page(html: str) -> Tuple[List[PageStoryRaw], bool]:
    """
    Parse one listing page.
    Returns the rows in page order and whether the page links to a next page.
    """
    soup = BeautifulSoup(html, "html.parser")
    rows = [parse_row(row) for row in soup.select(ITEM_SELECTOR)]
    has_more = soup.select_one(MORE_SELECTOR) is not None
    return rows, has_more
