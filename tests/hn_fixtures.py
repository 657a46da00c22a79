from typing import Iterable, Tuple

# (rank, title, href, points text, author, comments text)
Row = Tuple[int, str, str, str, str, str]

def story_html(rank: int, title: str, href: str, points: str, author: str, comments: str) -> str:
    return f"""
<tr class="athing submission" id="{rank}">
  <td align="right" valign="top" class="title"><span class="rank">{rank}.</span></td>
  <td valign="top" class="votelinks"><center><a id="up_{rank}" href="vote?id={rank}&amp;how=up"><div class="votearrow" title="upvote"></div></a></center></td>
  <td class="title"><span class="titleline"><a href="{href}">{title}</a><span class="sitebit comhead"> (<a href="from?site=example.com"><span class="sitestr">example.com</span></a>)</span></span></td>
</tr>
<tr>
  <td colspan="2"></td>
  <td class="subtext"><span class="subline">
    <span class="score" id="score_{rank}">{points}</span> by <a href="user?id={author}" class="hnuser">{author}</a>
    <span class="age" title="2024-01-01T00:00:00"><a href="item?id={rank}">2 hours ago</a></span> <span id="unv_{rank}"></span>
    | <a href="hide?id={rank}&amp;goto=news">hide</a> | <a href="item?id={rank}">{comments}</a>
  </span></td>
</tr>
<tr class="spacer" style="height:5px"></tr>"""

def page_html(rows: Iterable[Row], more: bool = True) -> str:
    body = "".join(story_html(*r) for r in rows)
    more_row = (
        '<tr class="morespace" style="height:10px"></tr>'
        '<tr><td colspan="2"></td><td class="title"><a href="?p=2" class="morelink" rel="next">More</a></td></tr>'
        if more else ""
    )
    return (
        '<html><head><title>Hacker News</title></head><body><center>'
        '<table id="hnmain"><tr><td><table border="0" cellpadding="0" cellspacing="0">'
        f"{body}{more_row}"
        "</table></td></tr></table></center></body></html>"
    )

def valid_row(rank: int, points: int, comments: int = 3) -> Row:
    return (rank, f"Story {rank}", f"https://example.com/{rank}", f"{points} points", f"user{rank}", f"{comments}\xa0comments")

def invalid_row(rank: int) -> Row:
    # relative link (Ask HN style) fails the absolute-uri rule
    return (rank, f"Ask HN: question {rank}", f"item?id={rank}", "7 points", f"user{rank}", "discuss")
