from __future__ import annotations
import sys
from typing import Any, Iterable, List, Optional, Type

from pydantic import ValidationError

from .models import Story


class RecordValidator:
    """
    Filters raw records through a Story schema.

    A record that fails validation is dropped on its own: it never raises,
    never counts toward the target and never touches its neighbours.
    """

    def __init__(self, schema: Type[Story] = Story, *, verbose: bool = False):
        self.schema = schema
        self.verbose = verbose
        self.rejected = 0

    def validate(self, raw: Any) -> Optional[Story]:
        try:
            record = self.schema.model_validate(raw)
        except ValidationError as e:
            self.rejected += 1
            if self.verbose:
                first = e.errors()[0]
                where = ".".join(str(p) for p in first.get("loc", ())) or "record"
                print(f"[skip] {self.schema.__name__} {where}: {first.get('msg')}", file=sys.stderr)
            return None
        return record.to_canonical()

    def filter(self, raws: Iterable[Any]) -> List[Story]:
        """Valid records of `raws`, canonicalized, in input order."""
        kept: List[Story] = []
        for raw in raws:
            story = self.validate(raw)
            if story is not None:
                kept.append(story)
        return kept
