"""Tests for series merging and bucketing."""

from datetime import date, timedelta

from app.models.frequency import ALL_REGIONS, ChunkResult, ChunkTask, DataPoint, Granularity, Region, SeriesData
from app.services.frequency.aggregator import bucket_points, build_series, combine_regions, merge_points


def points(*pairs):
    return [DataPoint(date=d, value=v) for d, v in pairs]


def daily(start: str, days: int, value: int = 1) -> list[DataPoint]:
    first = date.fromisoformat(start)
    return [DataPoint(date=(first + timedelta(days=i)).isoformat(), value=value) for i in range(days)]


class TestMerge:
    def test_sums_shared_dates(self):
        a = points(("2023-01-01", 1), ("2023-01-02", 2))
        b = points(("2023-01-02", 3), ("2023-01-03", 4))
        assert merge_points([a, b]) == points(("2023-01-01", 1), ("2023-01-02", 5), ("2023-01-03", 4))

    def test_commutative(self):
        a = points(("2023-01-02", 1), ("2023-01-01", 2))
        b = points(("2023-01-01", 3))
        assert merge_points([a, b]) == merge_points([b, a])

    def test_associative(self):
        a = points(("2023-01-01", 1))
        b = points(("2023-01-01", 2), ("2023-01-05", 1))
        c = points(("2023-01-05", 7))
        assert merge_points([merge_points([a, b]), c]) == merge_points([a, merge_points([b, c])])

    def test_empty(self):
        assert merge_points([]) == []
        assert merge_points([[], []]) == []

    def test_sorted_output(self):
        merged = merge_points([points(("2023-03-01", 1), ("2023-01-01", 1), ("2023-02-01", 1))])
        assert [p.date for p in merged] == ["2023-01-01", "2023-02-01", "2023-03-01"]


class TestBucket:
    def test_daily_identity(self):
        series = daily("2023-01-01", 3, 2)
        assert bucket_points(series, Granularity.DAILY) == series

    def test_monthly(self):
        result = bucket_points(daily("2023-01-01", 90, 2), Granularity.MONTHLY)
        assert result == points(("2023-01-01", 62), ("2023-02-01", 56), ("2023-03-01", 62))

    def test_monthly_mid_month_start(self):
        result = bucket_points(daily("2023-01-15", 20), Granularity.MONTHLY)
        assert result == points(("2023-01-01", 17), ("2023-02-01", 3))

    def test_weekly_starts_monday(self):
        # 2023-01-01 is a Sunday
        result = bucket_points(daily("2023-01-01", 9), Granularity.WEEKLY)
        assert result == points(("2022-12-26", 1), ("2023-01-02", 7), ("2023-01-09", 1))
        assert all(date.fromisoformat(p.date).weekday() == 0 for p in result)

    def test_totals_preserved(self):
        series = [DataPoint(date=p.date, value=i % 7) for i, p in enumerate(daily("2023-01-01", 120))]
        total = sum(p.value for p in series)
        for granularity in Granularity:
            assert sum(p.value for p in bucket_points(series, granularity)) == total

    def test_empty(self):
        assert bucket_points([], Granularity.WEEKLY) == []


def task(phrase, region, index, key):
    return ChunkTask(phrase=phrase, region=region, chunk_index=index, chunk_items=("a.com",), cache_key=key)


def result(phrase, region, index, pts):
    return ChunkResult(phrase=phrase, region=region, chunk_index=index, total=sum(p.value for p in pts), points=pts)


class TestBuildSeries:
    def test_merges_chunks_per_region(self):
        tasks = [task("inflation", Region.US, 0, "a"), task("inflation", Region.US, 1, "b")]
        results = {
            "a": result("inflation", "US", 0, daily("2023-01-01", 31)),
            "b": result("inflation", "US", 1, daily("2023-01-01", 31)),
        }
        series = build_series(tasks, results, Granularity.MONTHLY)
        assert series == [SeriesData(phrase="inflation", region="US", total=62, points=points(("2023-01-01", 62)))]

    def test_plan_order(self):
        tasks = [
            task("inflation", Region.EU, 0, "a"),
            task("inflation", Region.CA, 0, "b"),
            task("tariffs", Region.EU, 0, "c"),
        ]
        results = {k: result("x", "x", 0, daily("2023-01-01", 1)) for k in "abc"}
        series = build_series(tasks, results, Granularity.DAILY)
        assert [(s.phrase, s.region) for s in series] == [("inflation", "EU"), ("inflation", "CA"), ("tariffs", "EU")]

    def test_empty_chunks_give_empty_series(self):
        tasks = [task("inflation", Region.CA, 0, "a")]
        series = build_series(tasks, {"a": result("inflation", "CA", 0, [])}, Granularity.MONTHLY)
        assert series[0].points == []
        assert series[0].total == 0


class TestCombineRegions:
    def test_all_series(self):
        series = [
            SeriesData(phrase="inflation", region="US", total=3, points=points(("2023-01-01", 3))),
            SeriesData(phrase="inflation", region="CA", total=5, points=points(("2023-01-01", 1), ("2023-02-01", 4))),
            SeriesData(phrase="tariffs", region="US", total=2, points=points(("2023-01-01", 2))),
        ]
        combined = combine_regions(series, ["inflation", "tariffs"])
        assert combined[0] == SeriesData(
            phrase="inflation",
            region=ALL_REGIONS,
            total=8,
            points=points(("2023-01-01", 4), ("2023-02-01", 4)),
        )
        assert combined[1].phrase == "tariffs"
        assert combined[1].total == 2
