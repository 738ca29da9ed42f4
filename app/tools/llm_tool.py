"""
Insight Requester: summarizes feedback with one call to a language model.

Flow for a request:
1. Rank a copy of the records by urgency + value, keep the top N
2. Format each as "[channel] text (Urgency: u, Value: v)" and build the prompt
3. POST once to the messages endpoint (no retry, no streaming)
4. Read content[0].text, strip code fences, parse the JSON object
5. Build Insights from the four keys

Any failure in steps 3-5 is logged and answered with FALLBACK_INSIGHTS.
The caller always gets an InsightsResult, never an exception.

No API key is attached here; deployments route INSIGHTS_API_URL through a
proxy that injects credentials.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Sequence

import httpx
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..schemas import INSIGHT_KEYS, FeedbackRecord, Insights, InsightsResult
from .json_repair import JsonParseError, parse_json_object
from .mock_responses import get_mock_insights_text

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """As a product manager, analyze this customer feedback and provide:
1. Top 3 themes/patterns
2. Most urgent issues to address
3. Highest value opportunities
4. Recommended next actions

Feedback:
{feedback}

Respond in JSON format with keys: themes (array), urgentIssues (array), opportunities (array), recommendations (array)"""


class InsightRequestError(RuntimeError):
    """One stage of an insight request failed (transport, status, envelope, parse, shape)."""


def rank_records(records: Sequence[FeedbackRecord], limit: int = 20) -> List[FeedbackRecord]:
    """Top `limit` records by urgency + value, highest first. Input is not modified."""
    ranked = sorted(records, key=lambda r: r.priority_score, reverse=True)
    return ranked[:limit]


def format_record(record: FeedbackRecord) -> str:
    return f"[{record.channel.value}] {record.text} (Urgency: {record.urgency}, Value: {record.value})"


def build_prompt(records: Sequence[FeedbackRecord]) -> str:
    """Prompt embedding one formatted line per record, in the given order."""
    feedback = "\n".join(format_record(r) for r in records)
    return PROMPT_TEMPLATE.format(feedback=feedback)


def extract_answer_text(data: Any) -> str:
    """Pull content[0].text out of a messages-API response body."""
    if not isinstance(data, dict):
        raise InsightRequestError(f"Response body is not an object: {type(data).__name__}")
    if "error" in data:
        raise InsightRequestError(f"API error: {data['error']}")
    content = data.get("content")
    if not isinstance(content, list) or not content:
        raise InsightRequestError(f"Response has no content: {str(data)[:300]}")
    first = content[0]
    text = first.get("text") if isinstance(first, dict) else None
    if not isinstance(text, str) or not text.strip():
        raise InsightRequestError("Response content[0] has no text")
    return text


def parse_insights(answer: str) -> Insights:
    """Turn the model's answer into Insights.

    At least one of the four keys must be present; absent lists are empty.
    """
    try:
        data = parse_json_object(answer)
    except JsonParseError as e:
        raise InsightRequestError(f"Unparseable answer: {e}") from e

    present = [k for k in INSIGHT_KEYS if k in data]
    if not present:
        raise InsightRequestError(f"Answer has none of {list(INSIGHT_KEYS)}: keys={list(data)[:10]}")
    missing = set(INSIGHT_KEYS) - set(present)
    if missing:
        logger.info(f"Insights answer missing {sorted(missing)}; rendering them empty")
    try:
        return Insights.model_validate({k: data[k] for k in present})
    except ValidationError as e:
        raise InsightRequestError(f"Answer has the wrong shape: {e.error_count()} bad field(s)") from e


class InsightRequester:
    """Builds the prompt, makes the single request, parses or falls back.

    Holds only configuration and an optional HTTP transport, so sequential
    calls share no mutable state.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        mock_mode: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.mock_mode = mock_mode or self.settings.mock_mode
        self.transport = transport
        if self.mock_mode:
            logger.info("Insights: MOCK mode")
        else:
            logger.info(f"Insights: {self.settings.insights_model} via {self.settings.insights_api_url}")

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.settings.insights_model,
            "max_tokens": self.settings.insights_max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

    async def request_insights(self, records: Sequence[FeedbackRecord]) -> InsightsResult:
        """Summarize the top-ranked `records`. Never raises."""
        selected = rank_records(records, self.settings.insights_top_n)
        prompt = build_prompt(selected)
        start = time.monotonic()
        try:
            answer = await self._call(prompt)
            insights = parse_insights(answer)
        except Exception as e:
            latency_ms = int((time.monotonic() - start) * 1000)
            logger.error(f"Error generating insights ({type(e).__name__}): {e}")
            return InsightsResult.fallback(
                error=f"{type(e).__name__}: {e}",
                model=self.settings.insights_model,
                latency_ms=latency_ms,
                record_count=len(selected),
            )

        latency_ms = int((time.monotonic() - start) * 1000)
        logger.info(f"Insights generated from {len(selected)} records in {latency_ms}ms")
        return InsightsResult(
            insights=insights,
            model=self.settings.insights_model,
            latency_ms=latency_ms,
            record_count=len(selected),
        )

    async def _call(self, prompt: str) -> str:
        """One round trip; returns the answer text or raises InsightRequestError."""
        if self.mock_mode:
            return get_mock_insights_text(prompt)

        url = self.settings.insights_api_url
        headers = {"Content-Type": "application/json"}
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.insights_timeout, transport=self.transport,
            ) as client:
                response = await client.post(url, json=self.build_payload(prompt), headers=headers)
        except httpx.TimeoutException as e:
            raise InsightRequestError(
                f"Request timed out after {self.settings.insights_timeout:.0f}s"
            ) from e
        except httpx.HTTPError as e:
            raise InsightRequestError(f"Connection failed: {e}") from e

        if not response.is_success:
            raise InsightRequestError(f"API {response.status_code}: {response.text[:500]}")

        try:
            data = response.json()
        except ValueError as e:
            raise InsightRequestError(f"Response body is not JSON: {response.text[:200]}") from e

        text = extract_answer_text(data)
        logger.debug(f"Insights: got {len(text)} chars answer")
        return text
