"""Tests for locating days and buckets in a parsed document."""

from datetime import date

import pytest

from taskdeck.errors import TargetNotFoundError
from taskdeck.models import Bucket, Target, Urgency
from taskdeck.tasklist import find_today, locate, parse, resolve_day, target_for, today_section

MONDAY = date(2026, 2, 16)
TUESDAY = date(2026, 2, 17)
SUNDAY = date(2026, 2, 22)

DOC = """## Monday, Feb 16
### Must Do Today
- [ ] [a] First
## Tuesday, Feb 17
- [ ] [b] Second
## Backlog
- [ ] [c] Later
## Completed
- [x] [d] Done (Feb 15)
"""


@pytest.fixture
def doc():
    return parse(DOC)


class TestFindToday:
    """Tests for today's section lookup."""

    def test_matches_weekday(self, doc):
        assert find_today(doc, MONDAY) == 0
        assert find_today(doc, TUESDAY) == 1

    def test_falls_back_to_first_day(self, doc):
        assert find_today(doc, SUNDAY) == 0

    def test_empty_document(self):
        assert find_today(parse(""), MONDAY) == 0
        assert today_section(parse(""), MONDAY) is None

    def test_today_section(self, doc):
        assert today_section(doc, TUESDAY).day_name == "Tuesday"


class TestResolveDay:
    """Tests for relative day offsets."""

    def test_offsets(self, doc):
        assert resolve_day(doc, 0, MONDAY) == 0
        assert resolve_day(doc, 1, MONDAY) == 1
        assert resolve_day(doc, -1, TUESDAY) == 0

    @pytest.mark.parametrize("offset", [-1, 2])
    def test_out_of_range(self, doc, offset):
        with pytest.raises(TargetNotFoundError):
            resolve_day(doc, offset, MONDAY)


class TestLocate:
    """Tests for bucket lookup and edit targets."""

    def test_buckets(self, doc):
        assert locate(doc, doc.days[0].must_do[0]) == Bucket.DAY
        assert locate(doc, doc.backlog[0]) == Bucket.BACKLOG
        assert locate(doc, doc.completed[0]) == Bucket.COMPLETED

    def test_unknown_task(self, doc):
        other = parse("## Backlog\n- [ ] [z] Elsewhere\n").backlog[0]
        assert locate(doc, other) is None

    def test_target_for(self, doc):
        assert target_for(doc, doc.days[0].must_do[0], MONDAY) == Target.day(0, Urgency.MUST)
        assert target_for(doc, doc.days[1].normal_tasks[0], MONDAY) == Target.day(1)
        assert target_for(doc, doc.days[0].must_do[0], TUESDAY) == Target.day(-1, Urgency.MUST)
        assert target_for(doc, doc.backlog[0], MONDAY) == Target.backlog()
        assert target_for(doc, doc.completed[0], MONDAY) == Target.completed()

    def test_target_label(self):
        assert Target.day(0, Urgency.MUST).label == "Today / must"
        assert Target.day(2).label == "Today +2 / normal"
        assert Target.backlog().label == "Backlog"
