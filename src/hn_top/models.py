"""
Record shapes for both Hacker News surfaces and the canonical output.

Includes:
- PageStoryRaw: one listing row scraped from news?p=N
- ItemRaw: one item from /v0/item/{id}.json
- Story: canonical, validated story (pydantic)
- PageStory: Story plus the listing rank the scraper requires
- StoryView: display projection written to stdout

"""

from __future__ import annotations
from typing import Annotated, List, Optional, TypedDict

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    PositiveInt,
    StringConstraints,
    field_validator,
)

from .utils import is_absolute_uri

STRING_MAX_LENGTH = 256

BoundedStr = Annotated[str, StringConstraints(min_length=1, max_length=STRING_MAX_LENGTH)]

# news?p=N (one tr.athing row plus its subtext row)
class PageStoryRaw(TypedDict):
    title: str
    uri: Optional[str]
    author: str
    rank: int                # 0 when "N." did not match
    points: int              # 0 when "N points" did not match
    comments: int            # 0 when "N comments" did not match

# GET /v0/item/{id}.json
class ItemRaw(TypedDict, total=False):
    id: int
    type: str
    by: str
    title: str
    url: str
    score: int
    descendants: int
    time: int                # epoch seconds
    kids: List[int]
    dead: bool
    deleted: bool

# stdout
class StoryView(TypedDict):
    title: str
    uri: str
    author: str
    points: int
    comments: int
    rank: int


class Story(BaseModel):
    """Validated story. `rank` stays unset until the formatter ranks the final set."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: BoundedStr
    uri: str = Field(validation_alias=AliasChoices("uri", "url"))
    author: BoundedStr = Field(validation_alias=AliasChoices("author", "by"))
    points: PositiveInt = Field(validation_alias=AliasChoices("points", "score"))
    comments: NonNegativeInt = Field(validation_alias=AliasChoices("comments", "descendants"))
    rank: Optional[PositiveInt] = None

    @field_validator("uri")
    @classmethod
    def _absolute_uri(cls, value: str) -> str:
        if not is_absolute_uri(value):
            raise ValueError("uri must be absolute (scheme and host)")
        return value

    def to_canonical(self) -> "Story":
        return self


class PageStory(Story):
    """A listing row is only trusted when its "N." rank parsed."""

    rank: PositiveInt

    def to_canonical(self) -> Story:
        return Story.model_validate(self.model_dump(exclude={"rank"}))
