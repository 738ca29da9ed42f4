# Tools module
from .llm_tool import (
    InsightRequester,
    InsightRequestError,
    build_prompt,
    format_record,
    parse_insights,
    rank_records,
)
from .json_repair import JsonParseError, parse_json_object, strip_code_fences

__all__ = [
    # Summarization
    "InsightRequester",
    "InsightRequestError",
    "build_prompt",
    "format_record",
    "parse_insights",
    "rank_records",
    # JSON extraction
    "JsonParseError",
    "parse_json_object",
    "strip_code_fences",
]
