"""
Dashboard session tests: explicit recomputation, reset, and the
one-request-in-flight rule.
Run: pytest test_dashboard.py
"""

import asyncio
import json

import httpx
import pytest
from pydantic import ValidationError

from app.dashboard import FeedbackDashboard
from app.schemas import FALLBACK_INSIGHTS, FilterSpec
from app.store import RecordStore
from app.tools import InsightRequester
from conftest import make_record

ANSWER = {"themes": ["t"], "urgentIssues": ["u"], "opportunities": ["o"], "recommendations": ["r"]}


def _ok_transport(calls):
    def handler(request):
        calls.append(json.loads(request.content))
        return httpx.Response(200, json={"content": [{"type": "text", "text": json.dumps(ANSWER)}]})
    return httpx.MockTransport(handler)


@pytest.fixture
def dashboard(settings):
    calls = []
    board = FeedbackDashboard(
        store=RecordStore(settings=settings),
        requester=InsightRequester(settings=settings, transport=_ok_transport(calls)),
        settings=settings,
    )
    board.calls = calls
    board.load()
    return board


def test_view_recomputes_from_current_records_and_filters(dashboard, mixed_records):
    dashboard.replace_records(mixed_records)
    assert dashboard.view().summary.total == 12

    dashboard.set_filters(channel="Discord")
    view = dashboard.view()
    assert view.filters == FilterSpec(channel="Discord")
    assert [r.channel.value for r in view.filtered] == ["Discord"] * 3
    assert view.summary.total == 3

    dashboard.set_filters(search="mobile")
    assert [r.id for r in dashboard.view().filtered] == ["feedback-4"]


def test_set_filters_rejects_unknown_values(dashboard):
    with pytest.raises(ValidationError):
        dashboard.set_filters(sentiment="Furious")
    assert dashboard.filters == FilterSpec()


def test_replace_records_persists(dashboard, settings, mixed_records):
    dashboard.replace_records(mixed_records)
    assert RecordStore(settings=settings).load() == mixed_records


def test_generate_insights_uses_filtered_records(dashboard, mixed_records):
    dashboard.replace_records(mixed_records)
    dashboard.set_filters(sentiment="Positive")
    result = asyncio.run(dashboard.generate_insights())

    assert result.ok
    assert dashboard.insights.themes == ["t"]
    prompt = dashboard.calls[0]["messages"][0]["content"]
    assert prompt.count("(Urgency: ") == 5
    assert "Mobile app" not in prompt


def test_reset_clears_insights_and_reseeds(dashboard):
    asyncio.run(dashboard.generate_insights())
    assert dashboard.insights is not None

    before = dashboard.records
    records = dashboard.reset()
    assert dashboard.insights is None
    assert dashboard.last_result is None
    assert len(records) == 50 and records != before


def test_second_trigger_while_in_flight_is_ignored(settings):
    release = asyncio.Event()
    calls = []

    async def slow_handler(request):
        calls.append(request)
        await release.wait()
        return httpx.Response(200, json={"content": [{"text": json.dumps(ANSWER)}]})

    board = FeedbackDashboard(
        store=RecordStore(settings=settings),
        requester=InsightRequester(settings=settings, transport=httpx.MockTransport(slow_handler)),
        settings=settings,
    )
    board.replace_records([make_record(1)])

    async def scenario():
        first = asyncio.create_task(board.generate_insights())
        while not calls:
            await asyncio.sleep(0)
        assert board.is_generating
        second = await board.generate_insights()
        release.set()
        return await first, second

    first, second = asyncio.run(scenario())
    assert second is None
    assert first.ok
    assert len(calls) == 1
    assert not board.is_generating


def test_failed_request_still_replaces_previous_insights(dashboard, settings):
    asyncio.run(dashboard.generate_insights())
    assert dashboard.insights.themes == ["t"]

    dashboard.requester = InsightRequester(
        settings=settings,
        transport=httpx.MockTransport(lambda req: httpx.Response(503, text="unavailable")),
    )
    result = asyncio.run(dashboard.generate_insights())
    assert not result.ok
    assert dashboard.insights == FALLBACK_INSIGHTS
    assert not dashboard.is_generating
