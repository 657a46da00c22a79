from __future__ import annotations
import argparse, os, sys
from typing import Optional, Sequence

from .api import STORY_TYPES

GUARD = "hackernews"
NEWS_URL = "https://news.ycombinator.com"
API_URL = "https://hacker-news.firebaseio.com/v0"

def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hn-top", description="Print Hacker News top stories as JSON")
    p.add_argument("command", nargs="?", choices=[GUARD], help=f"must be '{GUARD}', otherwise nothing is done")
    p.add_argument("-p", "--posts", type=int, default=None, help="number of stories to print")
    p.add_argument("-m", "--messages", action="store_true", help="progress and error messages on stderr")
    p.add_argument("-s", "--stats", action="store_true", help="print elapsed time on stderr")
    p.add_argument("-r", "--reconnect", action="store_true", help="rerun from scratch after a fetch failure")
    p.add_argument("-a", "--attempts", type=int, default=int(os.getenv("ATTEMPTS_LIMIT", "5")))
    p.add_argument("--source", choices=("page", "api"), default=os.getenv("HN_SOURCE", "page"))
    p.add_argument("-t", "--type", dest="story_type", choices=STORY_TYPES, default="topstories",
                   help="story list used by --source api")
    p.add_argument("--concurrency", type=int, default=int(os.getenv("CONCURRENCY", "30")),
                   help="max items fetched at once by --source api")
    p.add_argument("--news-url", default=os.getenv("HN_NEWS_URL", NEWS_URL))
    p.add_argument("--api-url", default=os.getenv("HN_API_URL", API_URL))
    p.add_argument("--connect-timeout", type=float, default=_env_float("CONNECT_TIMEOUT"))
    p.add_argument("--read-timeout", type=float, default=_env_float("READ_TIMEOUT"))
    p.set_defaults(
        posts_default=int(os.getenv("POSTS_DEFAULT", "100")),
        posts_limit=int(os.getenv("POSTS_LIMIT", "100")),
    )
    return p

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)

def resolve_post_count(value: Optional[int], default: int, limit: int) -> int:
    """
    Unset -> default, above limit -> limit, non-positive -> 0 (nothing to do).
    Clamping is reported on stderr, never rejected.
    """
    if value is None:
        value = min(default, limit)
        print(f"--posts is not defined! Use standard value {value}", file=sys.stderr)
    if value <= 0:
        return 0
    if value > limit:
        print(f"--posts is larger than {limit}! Use standard value {limit}", file=sys.stderr)
        return limit
    return value
