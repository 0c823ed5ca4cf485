"""Test doubles for the clock and the DOC API."""

import json
from datetime import datetime, timedelta, timezone

import httpx


class FakeClock:
    """Manual clock: ``sleep`` advances time instantly and records the delay."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self._start = start
        self.elapsed = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.elapsed

    def now(self) -> datetime:
        return self._start + timedelta(seconds=self.elapsed)

    def advance(self, seconds: float) -> None:
        self.elapsed += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.elapsed += seconds


def timeline_body(points: list[tuple[str, int]]) -> str:
    """``timelinevolraw`` JSON for (YYYY-MM-DD, value) pairs."""
    data = [{"date": d.replace("-", "") + "T000000Z", "value": v} for d, v in points]
    return json.dumps({"query_details": {}, "timeline": [{"series": "Article Count", "data": data}]})


def daily_range(start: str, end: str, value: int = 1) -> list[tuple[str, int]]:
    day = datetime.strptime(start[:8], "%Y%m%d").date()
    last = datetime.strptime(end[:8], "%Y%m%d").date()
    points = []
    while day <= last:
        points.append((day.isoformat(), value))
        day += timedelta(days=1)
    return points


class FakeUpstream:
    """DOC API stand-in for ``httpx.MockTransport``.

    Queued responses are served first; afterwards every request gets one
    point of ``daily_value`` per day of the requested range.
    """

    def __init__(self, daily_value: int = 1):
        self.daily_value = daily_value
        self.requests: list[httpx.Request] = []
        self.queue: list[httpx.Response] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def queries(self) -> list[str]:
        return [r.url.params["query"] for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.queue:
            return self.queue.pop(0)
        params = request.url.params
        points = daily_range(params["startdatetime"], params["enddatetime"], self.daily_value)
        return httpx.Response(200, text=timeline_body(points))
