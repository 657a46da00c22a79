"""
Command-line entrypoint for hn-top.

- Checks the `hackernews` activation argument (anything else is a no-op)
- Parses CLI args and config, resolves --posts against default and ceiling
- Hands over to RunController:
    1. Collect stories from the listing pages or the JSON API
    2. Rank them by ascending points
    3. Print pretty JSON to stdout

Exit codes: 0 on success or no-op, 1 when every attempt failed, 130 on Ctrl-C.
"""
from __future__ import annotations
import asyncio, sys
from typing import Optional, Sequence

from .config import GUARD, parse_args, resolve_post_count
from .runner import RunController

async def run(args) -> int:
    if args.messages:
        source = f"{args.source} ({args.story_type})" if args.source == "api" else args.source
        print(f"""
            ====== hn-top ======
            Source         : {source}
            Posts          : {args.posts}
            Concurrency    : {args.concurrency}
            Reconnect      : {args.reconnect} (attempts={args.attempts})
            Timeouts (s)   : connect={args.connect_timeout} read={args.read_timeout}
            ====================
        """, file=sys.stderr)
    return await RunController(args).run()

def main(argv: Optional[Sequence[str]] = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] != GUARD:
        print(f"Nothing to do! Start with '{GUARD}' as the first argument.", file=sys.stderr)
        sys.exit(0)

    args = parse_args(argv)
    args.posts = resolve_post_count(args.posts, args.posts_default, args.posts_limit)
    if args.posts <= 0:
        print("Nothing to do! No posts.", file=sys.stderr)
        sys.exit(0)

    try:
        code = asyncio.run(run(args))
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
        sys.exit(130)
    sys.exit(code)
