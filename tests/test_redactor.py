"""Tests for the keyword redactor: registry, locator, extractor, masker, redactor."""

import logging
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from keyword_redactor import (
    KeywordRegistry, KeywordSpec, Redactor, RedactorConfig, redact,
)
from keyword_redactor.extractor import extract
from keyword_redactor.locator import find_occurrences, locate
from keyword_redactor.masker import mask

CARD = "4111 1111 1111 1111"


# ── Registry ─────────────────────────────────────────────────────────

def test_default_registry():
    reg = KeywordRegistry.default()
    assert len(reg) == 10
    assert reg.names[0] == "cardnumber"
    assert reg.as_dict()["cardnumber"] == 16
    assert reg.as_dict()["cvv"] == 0


def test_registry_bare_and_pairs():
    reg = KeywordRegistry.from_config(["cvv", ("cardnumber", 16)])
    assert list(reg) == [KeywordSpec("cvv", 0), KeywordSpec("cardnumber", 16)]


def test_registry_explicit_pair_wins_over_bare_name():
    reg = KeywordRegistry.from_config(["cardnumber", ("CardNumber", 16)])
    assert reg.as_dict() == {"cardnumber": 16}

    reg = KeywordRegistry.from_config([("cardnumber", 16), "CARDNUMBER"])
    assert reg.as_dict() == {"cardnumber": 16}


def test_registry_later_pair_overrides(caplog):
    with caplog.at_level(logging.WARNING, logger="keyword_redactor"):
        reg = KeywordRegistry.from_config([("pin", 4), "cvv", ("pin", 6)])
    assert reg.as_dict() == {"pin": 6, "cvv": 0}
    assert "configured twice" in caplog.text


def test_registry_normalizes_lengths(caplog):
    with caplog.at_level(logging.WARNING, logger="keyword_redactor"):
        reg = KeywordRegistry.from_config([
            ("a", -3), ("b", "abc"), ("c", "4"), ("d", True), ("e", None), ("f", 2.0),
            ("g", "²"),
        ])
    assert reg.as_dict() == {"a": 0, "b": 0, "c": 4, "d": 0, "e": 0, "f": 2, "g": 0}
    assert "invalid length" in caplog.text


def test_registry_skips_unusable_names():
    reg = KeywordRegistry.from_config([None, "", "   ", 42, ("", 3), "cvv"])
    assert reg.names == ["cvv"]


def test_registry_non_iterable_config_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING, logger="keyword_redactor"):
        reg = KeywordRegistry.from_config(5)
    assert reg == KeywordRegistry.default()
    assert "Unusable keyword configuration" in caplog.text


def test_registry_from_mapping():
    reg = KeywordRegistry.from_config({"cardnumber": 16, "cvv": 0})
    assert reg.as_dict() == {"cardnumber": 16, "cvv": 0}


def test_registry_lookup_is_case_insensitive():
    reg = KeywordRegistry.from_config([("CardNumber", 16)])
    assert "CARDNUMBER" in reg
    assert reg.get("cardNumber") == KeywordSpec("cardnumber", 16)
    assert reg.get("cvv") is None


def test_registry_is_immutable():
    reg = KeywordRegistry.from_config(["cvv"])
    with pytest.raises(AttributeError):
        reg.extra = 1
    assert KeywordRegistry.from_config(reg) is reg


# ── Locator ──────────────────────────────────────────────────────────

def test_locate_standalone_keyword():
    assert locate("exp: 04/25", "exp") == [3]


def test_locate_ignores_keyword_inside_word():
    assert locate("expiry 04/25", "exp") == []
    assert locate("cvv2 123", "cvv") == []
    assert locate("2cvv 123", "cvv") == []


def test_locate_ignores_keyword_inside_identifier():
    assert locate("cvv_code 123", "cvv") == []
    assert locate("x_cvv 123", "cvv") == []
    assert locate("account_card_number 1", "account_card_number") == [19]


def test_locate_all_occurrences_case_insensitive():
    assert locate("CVV 1 cvv 2 Cvv", "cvv") == [3, 9, 15]
    assert locate("cardexp 1 exp 2", "exp") == [13]


def test_locate_escapes_keyword():
    assert locate("a.b 1", "a.b") == [3]
    assert locate("axb 1", "a.b") == []


def test_locate_nothing():
    assert locate("", "cvv") == []
    assert locate("nothing here", "cvv") == []


def test_find_occurrences_carries_spec():
    spec = KeywordSpec("cvv", 0)
    occ = find_occurrences("cvv 1, cvv 2", spec)
    assert [o.end for o in occ] == [3, 10]
    assert all(o.keyword is spec for o in occ)


# ── Extractor ────────────────────────────────────────────────────────

def test_extract_dynamic_value():
    value = extract("cvv 123", 3)
    assert value.text == "123"
    assert value.start == 4
    assert value.length == 3


def test_extract_skips_label_separator():
    assert extract("cvv: 123", 3).start == 5
    assert extract("cvv=123", 3).start == 4
    assert extract("cvv - 123", 3).text == "123"


def test_extract_value_on_next_line():
    value = extract("cvv\n123", 3)
    assert value.text == "123"
    assert value.start == 4
    assert extract("cvv:\n  123\nname bob", 3).text == "123"


def test_extract_dynamic_joins_spaces_and_dots():
    assert extract(f"card {CARD}.", 4).text == CARD
    assert extract("fee 3.50, due", 3).text == "3.50"
    assert extract("x a  b", 1).text == "a"


def test_extract_stops_at_punctuation_and_newline():
    assert extract("exp 04/25", 3).text == "04"
    assert extract("cvv 123\nname bob", 3).text == "123"


def test_extract_nothing_after_keyword():
    assert extract("cvv", 3) is None
    assert extract("cvv    ", 3) is None
    assert extract("cvv ***", 3) is None
    assert extract("abc", 10) is None


def test_extract_bounded_stops_at_budget():
    text = f"cardnumber {CARD} extra"
    assert extract(text, 10, 16).text == CARD


def test_extract_bounded_cuts_long_first_token():
    assert extract("pin 123456", 3, 4).text == "1234"


def test_extract_bounded_token_count():
    assert extract("x a b c d e", 1, 3).text == "a b c"
    assert extract("x 12.34.56", 1, 4).text == "12.34"


def test_extract_bounded_skips_token_that_does_not_fit():
    assert extract("x 12 345", 1, 4).text == "12"


def test_extract_bounded_leaves_tokens_past_budget():
    assert extract("pin 12 34 56", 3, 4).text == "12 34"
    assert redact("pin 12 34 56", [("pin", 4)]) == "pin ***** 56"


# ── Masker ───────────────────────────────────────────────────────────

def test_mask():
    assert mask("123") == "***"
    assert mask("") == ""


def test_mask_preserves_length():
    for value in ["a", "04", CARD, "3.50", "x" * 100]:
        assert len(mask(value)) == len(value)
        assert set(mask(value)) == {"*"}


# ── Redactor ─────────────────────────────────────────────────────────

def test_redact_dynamic():
    assert redact("cvv 123", ["cvv"]) == "cvv ***"


def test_redact_default_table():
    assert redact("cvv 123, exp: 04/25") == "cvv ***, exp: **/25"


def test_redact_bounded_card_number():
    text = f"cardnumber {CARD} extra"
    assert redact(text, [("cardnumber", 16)]) == "cardnumber " + "*" * 19 + " extra"


def test_redact_keyword_without_value():
    assert redact("cvv", ["cvv"]) == "cvv"
    assert redact("the cvv.", ["cvv"]) == "the cvv."


def test_redact_multiple_occurrences():
    assert redact("exp 04/25 ... exp 05/26", ["exp"]) == "exp **/25 ... exp **/26"


def test_redact_word_boundary():
    assert redact("expiry 04/25", ["exp"]) == "expiry 04/25"
    assert redact("exp: 04/25", ["exp"]) == "exp: **/25"


def test_redact_skips_keyword_inside_identifier():
    assert redact("cvv_code 123", ["cvv"]) == "cvv_code 123"
    assert redact("x_cvv 123", ["cvv"]) == "x_cvv 123"


def test_redact_value_on_next_line():
    assert redact("cvv\n123", ["cvv"]) == "cvv\n***"
    assert redact("cvv\n***") == "cvv\n***"


def test_redact_cross_keyword_ordering():
    text = f"cardnumber {CARD} exp 04/25"
    out = redact(text, [("cardnumber", 16), "exp"])
    assert out == "cardnumber " + "*" * 19 + " exp **/25"


def test_redact_overlapping_keyword_names():
    result = Redactor().redact("cardexpiry 12/25")
    assert result.text == "cardexpiry **/25"
    assert result.occurrences == 1
    assert len(result.masked) == 1


def test_redact_idempotent():
    text = f"cvv 123 exp 04/25 cardnumber {CARD}"
    once = redact(text)
    assert once != text
    assert redact(once) == once
    assert redact("**** *** **/**") == "**** *** **/**"


def test_redact_preserves_length():
    for text in ["cvv 123", f"cardnumber {CARD} extra", "exp 04/25 exp 05/26", "plain"]:
        assert len(redact(text)) == len(text)


def test_redact_repeated_keyword_masks_once():
    result = Redactor(RedactorConfig(keywords=KeywordRegistry.from_config(["cvv"]))).redact(
        "cvv cvv 123"
    )
    assert result.text == "cvv *******"
    assert result.occurrences == 2
    assert len(result.masked) == 1


def test_redactor_config_accepts_raw_keywords():
    config = RedactorConfig(keywords=["cvv", ("pin", 4)], allow_list=["000"])
    assert isinstance(config.keywords, KeywordRegistry)
    assert config.allow_list == {"000"}
    assert Redactor(config).redact_text("cvv 123, pin 123456") == "cvv ***, pin ****56"


def test_redact_allow_list():
    r = Redactor(RedactorConfig(
        keywords=KeywordRegistry.from_config(["cvv"]),
        allow_list={"000"},
    ))
    assert r.redact_text("cvv 000, cvv 123") == "cvv 000, cvv ***"


def test_redact_result_diagnostics():
    result = Redactor().redact("cvv 123, and cvv")
    assert result.occurrences == 2
    assert [(v.keyword, v.start, v.length) for v in result.masked] == [("cvv", 4, 3)]


def test_redact_no_keywords():
    assert redact("cvv 123", []) == "cvv 123"
    assert Redactor().redact("").text == ""


def test_redact_debug_log_omits_values(caplog):
    with caplog.at_level(logging.DEBUG, logger="keyword_redactor"):
        redact("cvv 98765", ["cvv"])
    assert "'cvv'" in caplog.text
    assert "98765" not in caplog.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
