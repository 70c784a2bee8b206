"""Tests for claim-to-query reduction."""

from evidence_search.application.search import (
    DEFAULT_STOP_WORDS,
    QueryBuilderConfig,
    build_query,
    extract_terms,
)

# ============================================================
# build_query
# ============================================================


class TestBuildQuery:
    def test_example_claim(self):
        query = build_query("Our magnesium supplement helps improve sleep quality")
        assert query == "magnesium AND supplement AND helps AND improve AND sleep"

    def test_case_folded(self):
        assert build_query("MAGNESIUM Sleep") == "magnesium AND sleep"

    def test_stop_words_removed(self):
        assert build_query("effects of melatonin against insomnia") == "melatonin AND insomnia"

    def test_short_tokens_removed(self):
        # 3-character tokens are dropped, 4-character tokens kept
        assert build_query("zinc for gut and hip") == "zinc"

    def test_at_most_five_terms(self):
        query = build_query("alpha bravo charlie delta echoes foxtrot golf")
        assert query.split(" AND ") == ["alpha", "bravo", "charlie", "delta", "echoes"]

    def test_claim_order_preserved(self):
        assert build_query("sleep improves with magnesium") == "sleep AND improves AND magnesium"

    def test_empty_when_nothing_survives(self):
        assert build_query("it is so") == ""
        assert build_query("") == ""

    def test_punctuation_kept_on_tokens(self):
        # Whitespace split only; punctuation stays attached
        assert build_query("sleep, quality.") == "sleep, AND quality."

    def test_deterministic(self):
        claim = "Vitamin D supplementation reduces winter fatigue"
        assert build_query(claim) == build_query(claim)


# ============================================================
# Config
# ============================================================


class TestQueryBuilderConfig:
    def test_defaults(self):
        config = QueryBuilderConfig()
        assert config.min_token_length == 4
        assert config.max_terms == 5
        assert config.operator == "AND"
        assert config.stop_words is DEFAULT_STOP_WORDS

    def test_stop_words_table(self):
        for word in ("effects", "effect", "affects", "affect", "impact", "about", "should"):
            assert word in DEFAULT_STOP_WORDS

    def test_custom_config(self):
        config = QueryBuilderConfig(max_terms=2, operator="OR")
        assert build_query("magnesium improves sleep quality", config) == "magnesium OR improves"

    def test_extract_terms(self):
        assert extract_terms("The impact of caffeine on memory") == ["caffeine", "memory"]
