#!/usr/bin/env python3
"""
hn-top entry script (after `pip install -e .`).

Usage:
  python scripts/hn_top.py hackernews [--posts 30] [--source page|api] [-m] [-s] [-r] [-a 5]

Config via env:
  HN_NEWS_URL (default https://news.ycombinator.com)
  HN_API_URL (default https://hacker-news.firebaseio.com/v0)
  POSTS_DEFAULT / POSTS_LIMIT (default 100 / 100)
  ATTEMPTS_LIMIT (default 5)
  CONCURRENCY (default 30)
  CONNECT_TIMEOUT / READ_TIMEOUT (default unset, no timeout)
"""

from hn_top.cli import main

if __name__ == "__main__":
    main()
