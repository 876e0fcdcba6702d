"""Tests for the paginated query aggregator."""

import pytest

from jiri.errors import UpstreamError
from jiri.pagination import PAGE_SIZE, collect

from conftest import FakeTracker


def records(count, start=0):
    return [{"key": f"P-{i}"} for i in range(start, start + count)]


class TestCollect:
    """Tests for collect."""

    def test_limit_reached_with_cursor_outstanding(self):
        """Test a capped result reports more data available."""
        tracker = FakeTracker(
            pages=[
                (records(100), "t1"),
                (records(100, 100), "t2"),
                (records(50, 200), "t3"),
            ]
        )

        issues, more = collect(tracker, "project = P", ["key"], limit=250)

        assert len(issues) == 250
        assert more is True
        limits = [args[2] for name, args in tracker.calls if name == "fetch_page"]
        cursors = [args[3] for name, args in tracker.calls if name == "fetch_page"]
        assert limits == [100, 100, 50]
        assert cursors == [None, "t1", "t2"]

    def test_empty_string_cursor_stops(self):
        """Test an empty cursor ends the loop after one request."""
        tracker = FakeTracker(pages=[(records(40), "")])

        issues, more = collect(tracker, "project = P", ["key"], limit=250)

        assert len(issues) == 40
        assert more is False
        assert tracker.count("fetch_page") == 1

    def test_upstream_exhausted_before_limit(self):
        """Test running out of data reports no more available."""
        tracker = FakeTracker(pages=[(records(80), None)])

        issues, more = collect(tracker, "project = P", ["key"], limit=250)

        assert len(issues) == 80
        assert more is False
        assert tracker.count("fetch_page") == 1

    def test_last_page_without_cursor(self):
        tracker = FakeTracker(pages=[(records(100), "t1"), (records(100, 100), "t2"), (records(50, 200), None)])

        issues, more = collect(tracker, "q", ["key"], limit=1000)

        assert len(issues) == 250
        assert more is False

    def test_empty_page_stops(self):
        """Test an empty page is terminal even with a cursor."""
        tracker = FakeTracker(pages=[(records(100), "t1"), ([], "t2")])

        issues, more = collect(tracker, "q", ["key"], limit=1000)

        assert len(issues) == 100
        assert more is False
        assert tracker.count("fetch_page") == 2

    @pytest.mark.parametrize("limit", [0, -5])
    def test_non_positive_limit(self, limit):
        """Test no page is fetched when the limit is not positive."""
        tracker = FakeTracker(pages=[(records(10), None)])

        assert collect(tracker, "q", ["key"], limit=limit) == ([], False)
        assert tracker.count("fetch_page") == 0

    def test_exact_limit_on_page_boundary(self):
        tracker = FakeTracker(pages=[(records(100), "t1")])

        issues, more = collect(tracker, "q", ["key"], limit=100)

        assert len(issues) == 100
        assert more is True

    def test_oversized_page_is_truncated(self):
        tracker = FakeTracker(pages=[(records(100), "t1")])

        issues, _ = collect(tracker, "q", ["key"], limit=30)

        assert len(issues) == 30

    def test_forwards_query_and_fields(self):
        tracker = FakeTracker(pages=[(records(1), None)])

        collect(tracker, "assignee = currentUser()", ["key", "summary"], limit=5)

        assert tracker.calls[0] == ("fetch_page", ("assignee = currentUser()", ["key", "summary"], 5, None))

    def test_page_size(self):
        assert PAGE_SIZE == 100

    def test_failure_propagates(self):
        """Test a failing page aborts the whole aggregation."""

        class FailingTracker(FakeTracker):
            def fetch_page(self, query, fields, limit, cursor=None):
                if cursor == "t1":
                    raise UpstreamError(500, "boom")
                return super().fetch_page(query, fields, limit, cursor)

        tracker = FailingTracker(pages=[(records(100), "t1")])

        with pytest.raises(UpstreamError, match="500"):
            collect(tracker, "q", ["key"], limit=500)
