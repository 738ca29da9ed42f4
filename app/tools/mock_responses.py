"""
Mock summarization responses for demos and offline development (MOCK_MODE).

Deterministic: the answer depends only on the prompt. The canned text is
shaped like a real model answer (fenced JSON) so it exercises the same
parsing path as a live response.
"""

import hashlib
import json
import re
from collections import Counter

_LINE_RE = re.compile(r"^\[(?P<channel>[^\]]+)\] (?P<text>.+) \(Urgency: (?P<urgency>\d+), Value: (?P<value>\d+)\)$")

_MOCK_RECOMMENDATIONS = [
    ["Triage the top crash and timeout reports this sprint",
     "Publish rate-limit guidance in the API docs",
     "Scope a Slack integration spike"],
    ["Assign an owner to each high-urgency bug report",
     "Review mobile UX pain points with design",
     "Share a roadmap update on the most-requested features"],
    ["Add performance budgets for search and export",
     "Close the loop with users who reported blockers",
     "Re-run this analysis after the next release"],
]


def _unique(values) -> list:
    """Order-preserving dedupe."""
    return list(dict.fromkeys(values))


def get_mock_insights_text(prompt: str) -> str:
    """Return a fenced JSON answer summarizing the feedback lines in `prompt`."""
    items = []
    for line in prompt.splitlines():
        m = _LINE_RE.match(line.strip())
        if m:
            items.append((m["channel"], m["text"], int(m["urgency"]), int(m["value"])))

    prompt_hash = int(hashlib.md5(prompt.encode()).hexdigest()[:8], 16) % len(_MOCK_RECOMMENDATIONS)

    if not items:
        payload = {
            "themes": ["No feedback matched the current filters"],
            "urgentIssues": [],
            "opportunities": [],
            "recommendations": ["Broaden the filters and try again"],
        }
    else:
        top_texts = [text for text, _ in Counter(t for _, t, _, _ in items).most_common(3)]
        channels = Counter(c for c, _, _, _ in items)
        payload = {
            "themes": [f"{text} ({channels.most_common(1)[0][0]} most active)" if i == 0 else text
                       for i, text in enumerate(top_texts)],
            "urgentIssues": _unique(text for _, text, urgency, _ in items if urgency >= 8)[:3],
            "opportunities": _unique(text for _, text, _, value in items if value >= 8)[:3],
            "recommendations": _MOCK_RECOMMENDATIONS[prompt_hash],
        }

    return "```json\n" + json.dumps(payload, indent=2) + "\n```"
