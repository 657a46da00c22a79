from hn_top.models import PageStory, Story
from hn_top.validator import RecordValidator

API_ITEM = {
    "id": 8863, "type": "story", "by": "dhouston", "title": "My YC app: Dropbox",
    "url": "http://www.getdropbox.com/u/2/screencast.html", "score": 111, "descendants": 71,
    "kids": [8952, 9224], "time": 1175714200,
}

def test_api_item_is_renamed_to_canonical_fields():
    story = RecordValidator().validate(API_ITEM)
    assert story == Story(
        title="My YC app: Dropbox", uri="http://www.getdropbox.com/u/2/screencast.html",
        author="dhouston", points=111, comments=71,
    )
    assert story.rank is None
    assert set(story.model_dump()) == {"title", "uri", "author", "points", "comments", "rank"}

def test_numeric_strings_are_coerced():
    story = RecordValidator().validate({**API_ITEM, "score": "12", "descendants": "0"})
    assert story.points == 12
    assert story.comments == 0

def test_rejections_are_silent():
    v = RecordValidator()
    bad = [
        None,
        [],
        {**API_ITEM, "score": 0},
        {**API_ITEM, "descendants": -1},
        {**API_ITEM, "url": "item?id=8863"},
        {**API_ITEM, "title": ""},
        {**API_ITEM, "title": "x" * 257},
        {**API_ITEM, "by": ""},
        {**API_ITEM, "score": "twelve"},
        {k: val for k, val in API_ITEM.items() if k != "descendants"},
    ]
    assert all(v.validate(raw) is None for raw in bad)
    assert v.rejected == len(bad)

def test_filter_keeps_exactly_the_valid_records_in_order():
    raws = [
        {**API_ITEM, "title": "a", "score": 3},
        {**API_ITEM, "title": "b", "score": 0},
        None,
        {**API_ITEM, "title": "c", "score": 9},
        {**API_ITEM, "title": "d", "url": "/relative"},
    ]
    kept = RecordValidator().filter(raws)
    assert [(s.title, s.points) for s in kept] == [("a", 3), ("c", 9)]
    assert all(s.uri == API_ITEM["url"] and s.author == "dhouston" for s in kept)

def test_validation_is_idempotent():
    v = RecordValidator()
    story = v.validate(API_ITEM)
    assert v.validate(story.model_dump()) == story
    assert v.validate(story) == story
    assert Story.model_validate(story.model_dump()) == story

def test_page_rows_need_a_rank_and_lose_it_when_canonical():
    v = RecordValidator(PageStory)
    row = {"title": "Show HN: thing", "uri": "https://thing.dev", "author": "me",
           "rank": 4, "points": 15, "comments": 0}
    story = v.validate(row)
    assert type(story) is Story
    assert story.rank is None
    assert story.comments == 0
    assert v.validate({**row, "rank": 0}) is None
