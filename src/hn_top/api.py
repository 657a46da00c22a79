"""
Async wrappers around the two Hacker News surfaces.

- `NewsSite.news_page`: rendered listing HTML for `news?p=N`
- `HackerNewsAPI.story_ids`: ranked id list (`topstories.json`, ...)
- `HackerNewsAPI.item`: one item (`item/{id}.json`)

Non-JSON bodies from the API are reported on stderr and raised as ParseError.
"""
from __future__ import annotations
import sys
from typing import Any, List, Optional

from .errors import ParseError
from .http_client import HttpClient
from .models import ItemRaw

STORY_TYPES = ("topstories", "newstories", "beststories", "askstories", "showstories")


class NewsSite:

    def __init__(self, http: HttpClient):
        self.http = http

    async def news_page(self, page: int) -> str:
        return await self.http.get_text("/news", p=page)


class HackerNewsAPI:

    def __init__(self, http: HttpClient):
        self.http = http

    async def story_ids(self, kind: str = "topstories") -> List[int]:
        data = await self._get_json(f"/{kind}.json", what=kind)
        try:
            return [int(i) for i in data]
        except (TypeError, ValueError) as e:
            raise ParseError(f"{kind}: expected a list of ids, got {type(data).__name__}") from e

    async def item(self, item_id: int) -> Optional[ItemRaw]:
        return await self._get_json(f"/item/{item_id}.json", what=f"id {item_id}")

    async def _get_json(self, path: str, *, what: str) -> Any:
        resp = await self.http.request("GET", path, headers={"Accept": "application/json"})
        try:
            return resp.json()
        except ValueError as e:
            snippet = resp.text[:200]
            print(f"[warn] non-JSON response for {what}: {snippet}", file=sys.stderr)
            raise ParseError(f"non-JSON response for {what}", snippet=snippet) from e
