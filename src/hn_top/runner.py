"""
One end-to-end run: pick the pipeline, collect, rank, print.

On a fetch failure the whole run starts over with a fresh client, pipeline
and accumulator (no resuming from the last good page or batch), as long as
--reconnect is set and the attempt ceiling is not reached.
"""
from __future__ import annotations
import argparse, asyncio, contextlib, random, sys
from typing import Callable, List, Optional, TextIO

from .api import HackerNewsAPI, NewsSite
from .context import RunContext
from .errors import FetchError
from .formatter import format_stories, render_json
from .http_client import HttpClient
from .models import StoryView
from .pipeline import Accumulator, ItemBasedPipeline, PageBasedPipeline, Pipeline
from .validator import RecordValidator


class ReconnectPolicy:
    def __init__(
        self,
        enabled: bool = False,
        attempts: int = 5,
        backoff_base: float = 0.25,
        backoff_cap: float = 4.0,
    ):
        self.enabled = enabled
        self.attempts = max(0, attempts)
        self.backoff_base = backoff_base
        self.backoff_cap = backoff_cap

    def should_retry(self, reconnects: int) -> bool:
        return self.enabled and reconnects < self.attempts

    def sleep_seconds(self, attempt: int) -> float:
        # exponential (0.25, 0.5, 1, 2, 4...) + jitter [0..0.5]
        return min(self.backoff_cap, self.backoff_base * (2 ** (attempt - 1))) + random.uniform(0, 0.5)


async def progress_dots(stream: TextIO, interval: float = 1.0) -> None:
    while True:
        await asyncio.sleep(interval)
        stream.write(".")
        stream.flush()


class RunController:

    def __init__(
        self,
        args: argparse.Namespace,
        *,
        out: Optional[TextIO] = None,
        client_factory: Callable[..., HttpClient] = HttpClient,
        policy: Optional[ReconnectPolicy] = None,
    ):
        self.args = args
        self.out = out if out is not None else sys.stdout
        self.client_factory = client_factory
        self.policy = policy or ReconnectPolicy(enabled=args.reconnect, attempts=args.attempts)

    def base_url(self) -> str:
        return self.args.api_url if self.args.source == "api" else self.args.news_url

    def build_pipeline(self, http: HttpClient) -> Pipeline:
        if self.args.source == "api":
            return ItemBasedPipeline(HackerNewsAPI(http), kind=self.args.story_type,
                                     batch_size=self.args.concurrency)
        return PageBasedPipeline(NewsSite(http))

    async def run_once(self, ctx: RunContext) -> List[StoryView]:
        async with self.client_factory(
            self.base_url(),
            connect_timeout=self.args.connect_timeout,
            read_timeout=self.args.read_timeout,
            verbose=ctx.verbose,
        ) as http:
            pipeline = self.build_pipeline(http)
            validator = RecordValidator(pipeline.schema, verbose=ctx.verbose)
            stories = await Accumulator(pipeline, validator, self.args.posts, ctx).collect()
        if len(stories) < self.args.posts:
            ctx.log(f"\n[warn] source exhausted: {len(stories)}/{self.args.posts} stories collected.")
        return format_stories(stories)

    async def run(self) -> int:
        """Returns the process exit status."""
        reconnects = 0
        while True:
            ctx = RunContext(verbose=self.args.messages, stats=self.args.stats, attempt=reconnects + 1)
            ctx.log("Please, wait while loading and preparing data. It will take a while.")
            dots = asyncio.create_task(progress_dots(sys.stderr)) if ctx.verbose else None
            try:
                views = await self.run_once(ctx)
            except FetchError as e:
                ctx.log(f"\nSorry, an error occurred while loading your data: {e}")
                if not self.policy.should_retry(reconnects):
                    if self.policy.enabled:
                        ctx.log("Sorry, can't load stories. Please, try again!")
                    return 1
                reconnects += 1
                ctx.log(f"Trying to reconnect... (attempt {reconnects}/{self.policy.attempts})")
                await asyncio.sleep(self.policy.sleep_seconds(reconnects))
                continue
            finally:
                if dots is not None:
                    dots.cancel()
                    with contextlib.suppress(asyncio.CancelledError):
                        await dots

            self.out.write(render_json(views))
            self.out.flush()
            if ctx.stats:
                print(f"Time spent while getting top stories: {ctx.elapsed():.3f}s "
                      f"({ctx.rounds} round(s), {ctx.kept}/{ctx.fetched} records valid, "
                      f"attempt {ctx.attempt})", file=sys.stderr)
            return 0
