"""Series aggregation - merge chunk counts, re-bucket, combine regions.

Merge sums values sharing a date and is order-independent. Bucketing
re-keys each date to its bucket start and sums within the bucket, so totals
are always preserved.
"""

from collections.abc import Iterable, Mapping, Sequence

import polars as pl

from app.models.frequency import ALL_REGIONS, ChunkResult, ChunkTask, DataPoint, Granularity, SeriesData

_SCHEMA = {"date": pl.Utf8, "value": pl.Int64}

# Weekly windows start on Monday, monthly on the 1st
_TRUNCATE_EVERY = {
    Granularity.WEEKLY: "1w",
    Granularity.MONTHLY: "1mo",
}


def _frame(points: Iterable[DataPoint]) -> pl.DataFrame:
    points = list(points)
    return pl.DataFrame(
        {"date": [p.date for p in points], "value": [p.value for p in points]},
        schema=_SCHEMA,
    )


def _sum_by_date(frame: pl.DataFrame) -> list[DataPoint]:
    summed = frame.group_by("date").agg(pl.col("value").sum()).sort("date")
    return [DataPoint(date=d, value=v) for d, v in summed.iter_rows()]


def merge_points(point_lists: Iterable[Sequence[DataPoint]]) -> list[DataPoint]:
    """One date-sorted, duplicate-free list summing values per date."""
    return _sum_by_date(_frame(p for points in point_lists for p in points))


def bucket_points(points: Sequence[DataPoint], granularity: Granularity) -> list[DataPoint]:
    """Re-key daily points to bucket starts and sum within each bucket."""
    frame = _frame(points)
    every = _TRUNCATE_EVERY.get(Granularity(granularity))
    if every is not None:
        frame = frame.with_columns(
            pl.col("date").str.to_date("%Y-%m-%d").dt.truncate(every).dt.strftime("%Y-%m-%d")
        )
    return _sum_by_date(frame)


def build_series(
    tasks: Sequence[ChunkTask],
    results: Mapping[str, ChunkResult],
    granularity: Granularity,
) -> list[SeriesData]:
    """One series per (phrase, region), in plan order."""
    grouped: dict[tuple[str, str], list[list[DataPoint]]] = {}
    for task in tasks:
        result = results.get(task.cache_key)
        if result is None:
            continue
        grouped.setdefault((task.phrase, str(task.region)), []).append(result.points)

    series = []
    for (phrase, region), point_lists in grouped.items():
        points = bucket_points(merge_points(point_lists), granularity)
        series.append(SeriesData(phrase=phrase, region=region, total=sum(p.value for p in points), points=points))
    return series


def combine_regions(series: Sequence[SeriesData], phrases: Sequence[str]) -> list[SeriesData]:
    """An ``ALL`` series per phrase: date-wise sum of its already-bucketed region series."""
    combined = []
    for phrase in phrases:
        points = merge_points(s.points for s in series if s.phrase == phrase and s.region != ALL_REGIONS)
        combined.append(SeriesData(phrase=phrase, region=ALL_REGIONS, total=sum(p.value for p in points), points=points))
    return combined
