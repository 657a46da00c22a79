"""
Continuation-driven collection.

A pipeline knows how to start (first continuation state) and how to run one
round (fetch raw records for a state). The Accumulator drives rounds until it
holds `target` valid stories or the pipeline reports the source exhausted.

- PageBasedPipeline: one listing page per round, page cursor 1, 2, 3, ...
- ItemBasedPipeline: one concurrent batch of item ids per round, sized to the
  shortfall, taken from the front of the story id list
"""
from __future__ import annotations
import asyncio
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Tuple, Type, Union

from .api import HackerNewsAPI, NewsSite
from .context import RunContext
from .models import PageStory, Story
from .parser import parse_page
from .utils import unique
from .validator import RecordValidator


@dataclass(frozen=True)
class PageCursor:
    page: int = 1


@dataclass(frozen=True)
class IdQueue:
    pending: Tuple[int, ...] = ()


ContinuationState = Union[PageCursor, IdQueue]


@dataclass
class Round:
    records: List[Any]
    next_state: ContinuationState
    exhausted: bool


class Pipeline(Protocol):
    schema: Type[Story]

    async def start(self) -> ContinuationState: ...

    async def fetch_round(self, state: Any, shortfall: int) -> Round: ...


class PageBasedPipeline:
    schema: Type[Story] = PageStory

    def __init__(self, site: NewsSite):
        self.site = site

    async def start(self) -> PageCursor:
        return PageCursor(1)

    async def fetch_round(self, state: PageCursor, shortfall: int) -> Round:
        html = await self.site.news_page(state.page)
        rows, has_more = parse_page(html)
        # an empty page or the page without a "More" link is the last one
        return Round(rows, PageCursor(state.page + 1), exhausted=not rows or not has_more)


class ItemBasedPipeline:
    schema: Type[Story] = Story

    def __init__(self, api: HackerNewsAPI, kind: str = "topstories", batch_size: int = 30):
        self.api = api
        self.kind = kind
        self.batch_size = max(1, batch_size)

    async def start(self) -> IdQueue:
        ids = await self.api.story_ids(self.kind)
        return IdQueue(tuple(unique(ids)))

    async def fetch_round(self, state: IdQueue, shortfall: int) -> Round:
        size = max(1, min(shortfall, self.batch_size))
        batch, rest = state.pending[:size], state.pending[size:]
        items = await self._fetch_items(batch)
        return Round(items, IdQueue(rest), exhausted=not rest)

    async def _fetch_items(self, ids: Tuple[int, ...]) -> List[Any]:
        """
        Fire every id at once and wait for all of them.
        Results come back in id order regardless of completion order.
        """
        tasks = [asyncio.create_task(self.api.item(_id)) for _id in ids]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for t in tasks:
                t.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise


class Accumulator:
    """
    Round loop: fetch, validate in fetch order, then stop on target reached or
    source exhausted, otherwise advance the continuation state and go again.
    """

    def __init__(self, pipeline: Pipeline, validator: RecordValidator, target: int,
                 ctx: Optional[RunContext] = None):
        self.pipeline = pipeline
        self.validator = validator
        self.target = target
        self.ctx = ctx

    async def collect(self) -> List[Story]:
        if self.target <= 0:
            return []

        results: List[Story] = []
        state = await self.pipeline.start()
        while True:
            rnd = await self.pipeline.fetch_round(state, self.target - len(results))
            kept = self.validator.filter(rnd.records)
            results.extend(kept)
            if self.ctx is not None:
                self.ctx.record_round(len(rnd.records), len(kept))

            if len(results) >= self.target:
                return results[:self.target]
            if rnd.exhausted:
                return results
            # a round where everything was filtered out is not the end of the source
            state = rnd.next_state
