import pytest

from utils.sanitization import (
    desanitize_from_html,
    get_desanitized_if_sanitized,
    is_sanitized_html,
    sanitize_for_html,
)

PLAIN_TEXTS = [
    "Alice",
    "AT&T",
    "a & b",
    "Tom & Jerry; friends",
    "&nbsp; is not ours",
    "price < 5 > 3",
    'He said "hi"',
    "it's/its",
    "",
]


@pytest.mark.parametrize("text", ["J&amp;J", "&lt;b&gt;", "&quot;q&quot;", "a&#x2f;b", "it&#39;s"])
def test_detects_legacy_entities(text):
    assert is_sanitized_html(text)


@pytest.mark.parametrize("text", PLAIN_TEXTS)
def test_plain_text_not_detected(text):
    assert not is_sanitized_html(text)


def test_null_and_empty_are_safe():
    assert is_sanitized_html(None) is False
    assert is_sanitized_html("") is False
    assert get_desanitized_if_sanitized(None) is None
    assert get_desanitized_if_sanitized("") == ""


@pytest.mark.parametrize("text", PLAIN_TEXTS)
def test_idempotent_on_plain_text(text):
    once = get_desanitized_if_sanitized(text)
    assert once == text
    assert get_desanitized_if_sanitized(once) == text


@pytest.mark.parametrize("text", [
    "J&J",
    "<script>alert('x')</script>",
    'She said "no" & left',
    "path/to/file",
    "&lt without semicolon",
])
def test_reverses_legacy_escaping(text):
    escaped = sanitize_for_html(text)
    assert escaped != text
    assert is_sanitized_html(escaped)
    assert get_desanitized_if_sanitized(escaped) == text


def test_decodes_in_single_pass():
    # hand-made value: decoding is one pass, so the inner "&lt;" survives
    assert desanitize_from_html("&amp;lt;") == "&lt;"


def test_unknown_entities_left_alone():
    assert desanitize_from_html("a&amp;b&nbsp;c&#60;") == "a&b&nbsp;c&#60;"


def test_literal_entity_in_plain_text_is_decoded():
    # known ambiguity: a user who typed "&lt;" cannot be told apart from escaped "<"
    assert is_sanitized_html("a&lt;b")
    assert get_desanitized_if_sanitized("a&lt;b") == "a<b"
