"""
Post-processing of the model's free-text reply.

The model is asked for bare JSON but frequently wraps it in prose or code
fences, so the reply is searched for the outermost brace-delimited block
before parsing. Parsing never raises: callers branch on the returned
``ParsedReply`` / ``ReplyParseError``.
"""

import json
import math
import re
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any, Literal

from loguru import logger

from .cost_codes import cost_code_for
from .invoice_types import NormalizedInvoice

# Greedy: first "{" through last "}" in the reply
JSON_BLOCK_PATTERN = re.compile(r"\{.*\}", re.DOTALL)

DEFAULT_VENDOR = "Unknown Vendor"
CURRENCY_TOKENS = ("$", ",", "USD", "CAD", "AUD", "EUR", "GBP")


@dataclass(frozen=True)
class ParsedReply:
    data: dict[str, Any]


@dataclass(frozen=True)
class ReplyParseError:
    kind: Literal["not_found", "invalid_json"]
    message: str


def extract_json_block(text: str | None) -> str | None:
    if not text:
        return None
    match = JSON_BLOCK_PATTERN.search(text)
    return match.group(0) if match else None


def parse_model_reply(text: str | None) -> ParsedReply | ReplyParseError:
    """
    Locate and parse the JSON object embedded in a model reply.

    Returns:
        ParsedReply with the decoded object, or ReplyParseError with
        kind "not_found" (no brace block in the text) or "invalid_json"
        (a block was found but does not decode to a JSON object).
    """
    block = extract_json_block(text)
    if block is None:
        return ReplyParseError(kind="not_found", message="Could not extract data from invoice")

    try:
        data = json.loads(block)
    except ValueError as e:
        return ReplyParseError(kind="invalid_json", message=str(e))

    if not isinstance(data, dict):
        return ReplyParseError(kind="invalid_json", message="Extracted JSON is not an object")

    return ParsedReply(data=data)


def strip_data_url_prefix(value: str) -> str:
    """Drop a "data:<mime>;base64," header, keeping the segment after the first comma."""
    parts = value.split(",")
    if len(parts) > 1 and parts[1]:
        return parts[1]
    return value


def _coerce_amount(value: Any) -> float:
    if not value:
        return 0.0

    if isinstance(value, bool):
        logger.warning("Ignoring non-numeric amount", amount=repr(value))
        return 0.0

    if isinstance(value, (int, float)):
        try:
            return float(value) if math.isfinite(value) else 0.0
        except OverflowError:
            logger.warning("Amount out of range for a float")
            return 0.0

    if isinstance(value, str):
        # Handle "$1,250.00", "CAD 1250", "1,250.00"
        amount_str = value
        for token in CURRENCY_TOKENS:
            amount_str = amount_str.replace(token, "")
        try:
            amount = float(amount_str.strip())
        except ValueError:
            logger.warning("Could not parse amount", amount=value)
            return 0.0
        return amount if math.isfinite(amount) else 0.0

    logger.warning("Ignoring non-numeric amount", amount=repr(value))
    return 0.0


def _text_or(value: Any, default: str) -> str:
    return str(value) if value else default


def normalize_invoice(parsed: dict[str, Any], today: date | None = None) -> NormalizedInvoice:
    """
    Fill every field of the invoice record from a partially populated model reply.

    Missing or falsy values fall back to defaults: "Unknown Vendor", 0,
    today's UTC date and "" respectively. The category is passed through and
    only used to derive the cost code.
    """
    if today is None:
        today = datetime.now(UTC).date()

    category = parsed.get("category")

    return NormalizedInvoice(
        vendor=_text_or(parsed.get("vendor"), DEFAULT_VENDOR),
        amount=_coerce_amount(parsed.get("amount")),
        date=_text_or(parsed.get("date"), today.isoformat()),
        description=_text_or(parsed.get("description"), ""),
        cost_code=cost_code_for(category),
        category=category,
    )
