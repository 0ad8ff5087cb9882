"""
Tests for locating, parsing and normalizing the model's JSON reply.
"""

from datetime import date

import pytest

from src.services.reply_parser import (
    ParsedReply,
    ReplyParseError,
    extract_json_block,
    normalize_invoice,
    parse_model_reply,
    strip_data_url_prefix,
)

TODAY = date(2024, 3, 15)


def test_extract_json_block_is_greedy_first_to_last_brace():
    text = 'Result: {"vendor": "Acme"} and also {"note": 1} done'
    assert extract_json_block(text) == '{"vendor": "Acme"} and also {"note": 1}'


def test_extract_json_block_spans_lines():
    text = "```json\n{\n  \"vendor\": \"Acme\",\n  \"amount\": 12\n}\n```"
    assert extract_json_block(text) == '{\n  "vendor": "Acme",\n  "amount": 12\n}'


@pytest.mark.parametrize("text", ["", None, "no braces here", "only } closing {"])
def test_extract_json_block_returns_none_without_block(text):
    assert extract_json_block(text) is None


def test_parse_model_reply_returns_object():
    result = parse_model_reply('Sure! {"vendor": "Acme", "amount": 10}')
    assert isinstance(result, ParsedReply)
    assert result.data == {"vendor": "Acme", "amount": 10}


def test_parse_model_reply_distinguishes_not_found_from_invalid():
    not_found = parse_model_reply("I could not read the ticket.")
    assert isinstance(not_found, ReplyParseError)
    assert not_found.kind == "not_found"
    assert not_found.message == "Could not extract data from invoice"

    invalid = parse_model_reply('{"vendor": Acme}')
    assert isinstance(invalid, ReplyParseError)
    assert invalid.kind == "invalid_json"
    assert invalid.message.startswith("Expecting value")


def test_parse_model_reply_rejects_two_objects_joined_by_prose():
    result = parse_model_reply('{"a": 1} or maybe {"a": 2}')
    assert isinstance(result, ReplyParseError)
    assert result.kind == "invalid_json"


@pytest.mark.parametrize("value,expected", [
    ("data:image/jpeg;base64,XXXX", "XXXX"),
    ("data:image/png;base64,AAAA", "AAAA"),
    ("XXXX", "XXXX"),
    ("data:image/jpeg;base64,", "data:image/jpeg;base64,"),
    ("data:image/jpeg;base64,AAAA,BBBB", "AAAA"),
])
def test_strip_data_url_prefix(value, expected):
    assert strip_data_url_prefix(value) == expected


def test_normalize_full_reply():
    result = normalize_invoice({
        "vendor": "Acme",
        "amount": 150.5,
        "date": "2024-03-01",
        "description": "water truck",
        "category": "Water Hauling",
    }, today=TODAY)

    assert result.model_dump(by_alias=True) == {
        "vendor": "Acme",
        "amount": 150.5,
        "date": "2024-03-01",
        "description": "water truck",
        "costCode": "8305-160",
        "category": "Water Hauling",
    }


def test_normalize_empty_reply_fills_defaults():
    result = normalize_invoice({}, today=TODAY)

    assert result.vendor == "Unknown Vendor"
    assert result.amount == 0
    assert result.date == "2024-03-15"
    assert result.description == ""
    assert result.category is None
    assert result.cost_code == "OTHER"


def test_normalize_treats_falsy_values_as_missing():
    result = normalize_invoice(
        {"vendor": "", "amount": 0, "date": None, "description": None, "category": None},
        today=TODAY,
    )

    assert result.vendor == "Unknown Vendor"
    assert result.amount == 0
    assert result.date == "2024-03-15"
    assert result.description == ""


@pytest.mark.parametrize("amount,expected", [
    (1250, 1250.0),
    ("1,250.00", 1250.0),
    ("$98.10", 98.1),
    ("CAD 420", 420.0),
    ("about forty", 0.0),
    (True, 0.0),
    ([12], 0.0),
    (float("nan"), 0.0),
])
def test_normalize_coerces_amount(amount, expected):
    assert normalize_invoice({"amount": amount}, today=TODAY).amount == expected


def test_normalize_passes_unknown_category_through():
    result = normalize_invoice({"category": "Catering"}, today=TODAY)
    assert result.category == "Catering"
    assert result.cost_code == "OTHER"


def test_normalize_category_lookup_is_case_sensitive():
    result = normalize_invoice({"category": "water hauling"}, today=TODAY)
    assert result.category == "water hauling"
    assert result.cost_code == "OTHER"


def test_parse_model_reply_handles_integers_past_the_digit_limit():
    result = parse_model_reply('{"amount": ' + "9" * 5000 + "}")
    assert isinstance(result, ReplyParseError)
    assert result.kind == "invalid_json"


def test_normalize_oversized_integer_amount_is_zero():
    assert normalize_invoice({"amount": 10 ** 400}, today=TODAY).amount == 0.0


@pytest.mark.parametrize("category", [42, ["Fuel"], {"name": "Fuel"}])
def test_normalize_passes_non_string_category_through_unchanged(category):
    result = normalize_invoice({"category": category}, today=TODAY)
    assert result.category == category
    assert result.cost_code == "OTHER"
