"""Tests for the DOC API client."""

from datetime import date

import httpx
import pytest

from gdelt_client import DocClient, UpstreamError, UpstreamRateLimited
from gdelt_client.doc import build_query, end_datetime, phrase_clause, source_clause, start_datetime
from fakes import timeline_body

START = "20230101000000"
END = "20230103235959"


@pytest.fixture
def make_client(upstream, limiter, clock):
    def make(**kwargs):
        return DocClient(limiter=limiter, transport=httpx.MockTransport(upstream), sleep=clock.sleep, **kwargs)

    return make


class TestQuery:
    def test_long_phrase_quoted(self):
        assert phrase_clause(" interest rates ") == '"interest rates"'

    def test_short_phrase_bare(self):
        assert phrase_clause("gdp") == "gdp"

    def test_single_source_bare(self):
        assert source_clause(["cbc.ca"], "domains") == "domain:cbc.ca"

    def test_sources_or_joined(self):
        assert source_clause(["cbc.ca", "thestar.com"], "domains") == "(domain:cbc.ca OR domain:thestar.com)"

    def test_sourcecountry(self):
        query = build_query("inflation", ["france", "germany"], "sourcecountry")
        assert query == '"inflation" (sourcecountry:france OR sourcecountry:germany)'

    def test_datetimes(self):
        assert start_datetime(date(2023, 1, 1)) == "20230101000000"
        assert end_datetime(date(2023, 3, 31)) == "20230331235959"


class TestTimeline:
    async def test_parses_counts(self, upstream, make_client):
        upstream.queue.append(httpx.Response(200, text=timeline_body([("2023-01-01", 4), ("2023-01-02", 0)])))
        async with make_client() as client:
            result = await client.timeline('"inflation"', START, END)
        assert result.daily_counts() == [("2023-01-01", 4), ("2023-01-02", 0)]
        assert upstream.requests[0].url.params["mode"] == "timelinevolraw"

    async def test_missing_value_is_zero(self, upstream, make_client):
        body = '{"timeline": [{"series": "x", "data": [{"date": "20230101T000000Z", "value": null}]}]}'
        upstream.queue.append(httpx.Response(200, text=body))
        async with make_client() as client:
            result = await client.timeline("inflation", START, END)
        assert result.daily_counts() == [("2023-01-01", 0)]

    async def test_empty_body_is_empty_timeline(self, upstream, make_client):
        upstream.queue.append(httpx.Response(200, text="  "))
        async with make_client() as client:
            result = await client.timeline("inflation", START, END)
        assert result.daily_counts() == []

    async def test_empty_timeline_array(self, upstream, make_client):
        upstream.queue.append(httpx.Response(200, text='{"timeline": []}'))
        async with make_client() as client:
            result = await client.timeline("inflation", START, END)
        assert result.daily_counts() == []

    async def test_rate_limited_then_success(self, upstream, make_client, clock):
        upstream.queue.append(httpx.Response(429, text="slow down"))
        async with make_client() as client:
            result = await client.timeline("inflation", START, END)
            assert client.request_count == 2
        assert upstream.calls == 2
        assert clock.sleeps == [6.0]
        assert len(result.daily_counts()) == 3

    async def test_rate_limit_exhausted(self, upstream, make_client, clock):
        upstream.queue.extend(httpx.Response(429) for _ in range(3))
        async with make_client() as client:
            with pytest.raises(UpstreamRateLimited) as exc:
                await client.timeline("inflation", START, END)
        assert upstream.calls == 3
        assert exc.value.attempts == 3
        assert exc.value.retryable is True
        assert clock.sleeps == [6.0, 6.0]

    async def test_retry_count_configurable(self, upstream, make_client):
        upstream.queue.extend(httpx.Response(429) for _ in range(3))
        async with make_client(max_retries=0) as client:
            with pytest.raises(UpstreamRateLimited):
                await client.timeline("inflation", START, END)
        assert upstream.calls == 1

    async def test_server_error_not_retried(self, upstream, make_client):
        upstream.queue.append(httpx.Response(500, text="x" * 500))
        async with make_client() as client:
            with pytest.raises(UpstreamError) as exc:
                await client.timeline('"inflation" domain:cbc.ca', START, END)
        assert upstream.calls == 1
        assert exc.value.status == 500
        assert exc.value.snippet == "x" * 300
        assert exc.value.query == '"inflation" domain:cbc.ca'
        assert exc.value.retryable is False

    async def test_invalid_json(self, upstream, make_client):
        upstream.queue.append(httpx.Response(200, text="Your query was too short"))
        async with make_client() as client:
            with pytest.raises(UpstreamError, match="non-JSON"):
                await client.timeline("inflation", START, END)

    async def test_unexpected_shape(self, upstream, make_client):
        upstream.queue.append(httpx.Response(200, text='{"timeline": "nope"}'))
        async with make_client() as client:
            with pytest.raises(UpstreamError):
                await client.timeline("inflation", START, END)

    async def test_transport_error(self, limiter, clock):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = DocClient(limiter=limiter, transport=httpx.MockTransport(fail), sleep=clock.sleep)
        async with client:
            with pytest.raises(UpstreamError, match="request failed"):
                await client.timeline("inflation", START, END)


class TestProbe:
    async def test_returns_raw_response(self, upstream, make_client):
        async with make_client() as client:
            result = await client.probe('"inflation"', START, END)
        assert result.error is None
        assert result.query == '"inflation"'
        assert "timelinevolraw" in result.url
        assert result.parsed_json["timeline"][0]["data"][0]["value"] == 1

    async def test_reports_http_error(self, upstream, make_client):
        upstream.queue.append(httpx.Response(429, text="slow down"))
        async with make_client() as client:
            result = await client.probe("inflation", START, END)
        assert result.error == "HTTP 429"
        assert result.raw_text == "slow down"
        assert upstream.calls == 1

    async def test_reports_parse_error(self, upstream, make_client):
        upstream.queue.append(httpx.Response(200, text="<html>"))
        async with make_client() as client:
            result = await client.probe("inflation", START, END)
        assert result.error == "Failed to parse JSON"
        assert result.parsed_json is None

    async def test_truncates_raw_text(self, upstream, make_client):
        upstream.queue.append(httpx.Response(500, text="y" * 2000))
        async with make_client() as client:
            result = await client.probe("inflation", START, END)
        assert len(result.raw_text) == 1000
