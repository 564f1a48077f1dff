"""Decodes the analysis object embedded in free-form provider output."""

import json
from typing import Any

from app.analyzer.exceptions import ResponseParseError
from app.analyzer.models import (
    ABNORMAL_STATUSES,
    DOCUMENT_TYPES,
    NOT_SPECIFIED,
    PARSE_ERROR,
    AnalysisResult,
    LabResult,
    Medication,
)
from app.logging.logger import Log

_RAW_TEXT_LIMIT = 500


def parse_analysis_response(
    raw: str,
    *,
    combined_text: str,
    documents_analyzed: int,
) -> AnalysisResult:
    """Build an AnalysisResult from the provider's raw response.

    Never raises for malformed output: an undecodable response yields a
    degraded result with ``error=True``.
    """
    try:
        data = decode_analysis_object(raw)
        return build_result(data, documents_analyzed=documents_analyzed)
    except ResponseParseError as exc:
        Log.error(f"Error parsing analyzer response: {exc}")
        return build_degraded_result(combined_text, documents_analyzed=documents_analyzed)


def find_json_object(text: str) -> str | None:
    """Return the region from the first ``{`` to its matching ``}``, or None.

    Braces inside JSON string literals are ignored. An opening brace that never
    closes (truncated output) yields None rather than an inner object.
    """
    start = text.find("{")
    if start == -1:
        return None
    end = _matching_brace(text, start)
    if end is None:
        return None
    return text[start : end + 1]


def _matching_brace(text: str, start: int) -> int | None:
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return None


def decode_analysis_object(raw: str) -> dict[str, Any]:
    """Decode the first JSON object in raw, or the whole of raw if none is found.

    Raises:
        ResponseParseError: if nothing decodes to a JSON object.
    """
    candidate = find_json_object(raw)
    if candidate is None:
        candidate = raw
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise ResponseParseError(f"Invalid JSON response: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ResponseParseError("JSON response must be an object")
    return parsed


def build_result(data: dict[str, Any], *, documents_analyzed: int) -> AnalysisResult:
    """Populate an AnalysisResult from a decoded object, defaulting absent fields.

    Raises:
        ResponseParseError: if lab_results or medications have the wrong shape.
    """
    lab_results = [
        _build_lab_result(item, i) for i, item in enumerate(_list_field(data, "lab_results"))
    ]
    medications = [
        _build_medication(item, i) for i, item in enumerate(_list_field(data, "medications"))
    ]
    return AnalysisResult(
        document_type=_document_type(data.get("type")),
        date=_text(data.get("date"), NOT_SPECIFIED),
        doctor=_text(data.get("doctor"), NOT_SPECIFIED),
        lab_results=lab_results,
        medications=medications,
        documents_analyzed=documents_analyzed,
        summary=_text(data.get("summary"), "No summary provided"),
    )


def build_degraded_result(combined_text: str, *, documents_analyzed: int) -> AnalysisResult:
    """Best-effort result used when the provider response cannot be decoded."""
    guessed_type = "lab_report" if "blood" in combined_text.lower() else "prescription"
    return AnalysisResult(
        document_type=guessed_type,
        date=PARSE_ERROR,
        doctor=PARSE_ERROR,
        lab_results=[],
        medications=[],
        documents_analyzed=documents_analyzed,
        summary="Error parsing results",
        raw_text=combined_text[:_RAW_TEXT_LIMIT],
        error=True,
    )


def _list_field(data: dict[str, Any], key: str) -> list[Any]:
    raw = data.get(key)
    if not raw:
        return []
    if not isinstance(raw, list):
        raise ResponseParseError(f"'{key}' must be a list")
    return raw


def _build_lab_result(raw: Any, index: int) -> LabResult:
    if not isinstance(raw, dict):
        raise ResponseParseError(f"Lab result at index {index} must be an object")
    return LabResult(
        test=_text(raw.get("test"), ""),
        value=_text(raw.get("value"), ""),
        reference_range=_text(raw.get("range"), ""),
        status=_status(raw.get("status")),
    )


def _build_medication(raw: Any, index: int) -> Medication:
    if not isinstance(raw, dict):
        raise ResponseParseError(f"Medication at index {index} must be an object")
    return Medication(
        name=_text(raw.get("name"), ""),
        dosage=_text(raw.get("dosage"), ""),
        frequency=_text(raw.get("frequency"), ""),
        duration=_text(raw.get("duration"), ""),
        instructions=_text(raw.get("instructions"), ""),
    )


def _text(raw: Any, default: str) -> str:
    if raw is None or raw == "":
        return default
    if isinstance(raw, str):
        return raw
    return str(raw)


def _status(raw: Any) -> str | None:
    if raw is None:
        return None
    status = str(raw).strip().upper()
    return status if status in ABNORMAL_STATUSES else None


def _document_type(raw: Any) -> str:
    doc_type = _text(raw, "unknown").strip().lower().replace(" ", "_").replace("-", "_")
    return doc_type if doc_type in DOCUMENT_TYPES else "unknown"
