from __future__ import annotations
import json
from typing import List, Sequence

from .models import Story, StoryView

def format_stories(stories: Sequence[Story]) -> List[StoryView]:
    """
    Sort by ascending points (stable, so equal scores keep collection order)
    and rank 1..N over the sorted list. Rank 1 is the lowest score.
    """
    ordered = sorted(stories, key=lambda s: s.points)
    return [
        {
            "title": s.title,
            "uri": s.uri,
            "author": s.author,
            "points": s.points,
            "comments": s.comments,
            "rank": rank,
        }
        for rank, s in enumerate(ordered, 1)
    ]

def render_json(views: Sequence[StoryView]) -> str:
    return json.dumps(list(views), indent=2, ensure_ascii=False) + "\n"
