# ===============================================
# Truncation heuristic
# ===============================================
import pytest

from src.generate.continuation import MIN_CONTINUATION_LENGTH, looks_truncated


def body(last_char: str, length: int = MIN_CONTINUATION_LENGTH) -> str:
    return "w" * (length - 1) + last_char


@pytest.mark.parametrize("last", [",", "-", ":", "a", "7", ".", "*"])
def test_short_text_is_never_truncated(last):
    assert looks_truncated(body(last, length=MIN_CONTINUATION_LENGTH - 1)) is False


def test_length_is_measured_after_trim():
    padded = "   " + body(",", length=MIN_CONTINUATION_LENGTH - 1) + "\n\n   "
    assert looks_truncated(padded) is False


@pytest.mark.parametrize("last", [".", "!", "?", '"', "”", ")", "]", "`", "*"])
def test_terminal_punctuation_means_complete(last):
    assert looks_truncated(body(last)) is False


@pytest.mark.parametrize("last", ["-", ":", ","])
def test_dangling_punctuation_means_truncated(last):
    assert looks_truncated(body(last)) is True


@pytest.mark.parametrize("last", ["a", "Z", "9", ";", "#", "'", "🎁"])
def test_other_endings_default_to_truncated(last):
    assert looks_truncated(body(last)) is True


def test_trailing_whitespace_is_ignored():
    assert looks_truncated(body(".") + "\n  \t") is False
    assert looks_truncated(body(",") + "\n  \t") is True


def test_markdown_bold_cta_counts_as_complete():
    text = "### Key features\n" + "- Hand-stitched canvas\n" * 12 + "**Order yours today**"
    assert len(text) >= MIN_CONTINUATION_LENGTH
    assert looks_truncated(text) is False
