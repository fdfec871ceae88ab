"""
Submitted content normalizer for the Templating context.

Callers paste resume content that is expected to be a JSON object but often
arrives wrapped in markdown code fences or surrounded by prose. This module
extracts the object, makes one repair attempt on common syntax slips, and
checks that the required top-level fields are present.
"""

import json
import re
from typing import Any, Dict

from press.contexts.templating.document_data_structure import (
    SubmittedContent,
    SubmittedExperience,
)
from press.contexts.templating.exceptions import MalformedInputError, MissingFieldsError
from press.contexts.templating.logger import (
    _log_error,
    _log_info,
    _log_success,
    log_content_diagnostics,
    log_parse_failure,
)

REQUIRED_FIELDS = ("title", "summary", "skills", "experience")

# Opening fences may carry a language tag (```json, ```javascript, ...)
CODE_FENCE = re.compile(r"```[A-Za-z0-9_+-]*\s*")
TRAILING_COMMA = re.compile(r",(\s*[}\]])")
REPEATED_COMMA = re.compile(r",\s*,")

NO_OBJECT_MESSAGE = (
    "Invalid JSON format. Please provide valid JSON with title, summary, skills, "
    "and experience fields."
)


def strip_code_fences(text: str) -> str:
    """
    Remove every markdown code fence delimiter from text.

    Args:
        text: Raw submitted text

    Returns:
        Trimmed text with fences removed wherever they occur
    """
    return CODE_FENCE.sub("", text.strip()).strip()


def extract_json_object(text: str) -> str:
    """
    Slice text to the span from the first '{' to the last '}'.

    Args:
        text: Fence-free text that should contain one JSON object

    Returns:
        The candidate JSON object text

    Raises:
        MalformedInputError: If there is no '{' ... '}' span
    """
    first_brace = text.find("{")
    last_brace = text.rfind("}")

    if first_brace == -1 or last_brace == -1 or last_brace < first_brace:
        _log_error("No JSON object found in input")
        raise MalformedInputError(NO_OBJECT_MESSAGE)

    return text[first_brace : last_brace + 1]


def repair_json(text: str) -> str:
    """Remove trailing commas before closing brackets and collapse repeated commas."""
    text = TRAILING_COMMA.sub(r"\1", text)
    return REPEATED_COMMA.sub(",", text)


def parse_json_object(text: str) -> Dict[str, Any]:
    """
    Parse text as a JSON object, with one repair attempt.

    Args:
        text: Candidate JSON object text

    Returns:
        Parsed object

    Raises:
        MalformedInputError: If neither the strict nor the repaired parse
            yields an object. Carries the strict parser's message.
    """
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as original_error:
        log_parse_failure(str(original_error), text)
        try:
            parsed = json.loads(repair_json(text))
        except json.JSONDecodeError:
            _log_error("Failed to parse even after fixes")
            raise MalformedInputError(
                "Invalid JSON format", parser_message=str(original_error), snippet=text[:200]
            ) from original_error
        _log_success("Parsed after removing trailing and repeated commas")

    if not isinstance(parsed, dict):
        raise MalformedInputError(
            f"Invalid JSON format: expected an object, got {type(parsed).__name__}"
        )
    return parsed


def check_required_fields(data: Dict[str, Any]) -> None:
    """
    Raise MissingFieldsError unless every required field is present.

    A key whose value is null counts as missing; empty strings, objects and
    arrays are present.
    """
    missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
    if missing:
        _log_error(f"Missing required fields in JSON: {missing} (keys: {list(data.keys())})")
        raise MissingFieldsError(missing=missing, present=data.keys(), required=REQUIRED_FIELDS)


def normalize_content(raw_text: str) -> SubmittedContent:
    """
    Turn caller-supplied text into structured SubmittedContent.

    This is the main entry point for content normalization.
    Handles:
    - Code fences anywhere in the text (```json, ``` ...)
    - Prose before the first '{' and after the last '}'
    - Trailing commas and doubled commas (one repair attempt)
    - Required field validation (title, summary, skills, experience)

    Args:
        raw_text: Text expected to contain a JSON object

    Returns:
        SubmittedContent with experience entries typed and the raw object kept

    Raises:
        MalformedInputError: No object found, unparseable, or wrong shape
        MissingFieldsError: A required field is absent or null

    Example:
        >>> content = normalize_content('```json\\n{"title": "Engineer", ...}\\n```')
        >>> content.title
        'Engineer'
    """
    _log_info("Parsing completed resume JSON...")

    text = extract_json_object(strip_code_fences(raw_text))
    data = parse_json_object(text)
    check_required_fields(data)

    experience = data["experience"]
    if not isinstance(experience, list):
        raise MalformedInputError(
            f"Invalid JSON format: 'experience' must be a list, got {type(experience).__name__}"
        )

    content = SubmittedContent(
        title=data["title"],
        summary=data["summary"],
        skills=data["skills"],
        experience=[SubmittedExperience.from_raw(entry) for entry in experience],
        raw=data,
    )
    log_content_diagnostics(content)
    return content
