"""Unit tests for row filtering masks, combinators and selection conventions."""

from __future__ import annotations

import pytest

from genotables.tables.filters import (
    SELECTION_ALL,
    all_of,
    any_of,
    default_selections,
    equals,
    filter_by_selections,
    filter_rows,
    format_selection_display,
    is_filtered,
    is_in,
    matches,
    selection_options,
    selection_values,
)


def test_equals_filter(variants_df):
    out = filter_rows(variants_df, equals(variants_df, "type", "SNP"))
    assert set(out["type"]) == {"SNP"}
    assert len(out) == 4


def test_is_in_filter(variants_df):
    out = filter_rows(variants_df, is_in(variants_df, "gene", {"TP53", "EGFR"}))
    assert sorted(out["gene"]) == ["EGFR", "TP53", "TP53"]


def test_matches_filter(variants_df):
    out = filter_rows(variants_df, matches(variants_df, "cdna", "del"))
    assert out["cdna"].tolist() == ["c.68_69delAG", "c.2235_2249del15"]


def test_membership_and_pattern_is_intersection(variants_df):
    """Combined predicate keeps exactly the rows satisfying both conditions."""
    m_in = is_in(variants_df, "gene", {"BRCA1", "TP53"})
    m_pat = matches(variants_df, "cdna", r"C>T|G>A")
    out = filter_rows(variants_df, m_in & m_pat)

    expected = set(variants_df.index[m_in]) & set(variants_df.index[m_pat])
    assert len(out) == len(expected)
    assert sorted(out["cdna"]) == sorted(variants_df.loc[sorted(expected), "cdna"])
    assert out["cdna"].tolist() == ["c.743G>A", "c.4327C>T", "c.818G>A"]


def test_or_and_not_combinators(variants_df):
    mask = (equals(variants_df, "type", "INDEL") | equals(variants_df, "filter", "LowQual")) & ~equals(
        variants_df, "sample", "S1"
    )
    out = filter_rows(variants_df, mask)
    assert out["cdna"].tolist() == ["c.4327C>T", "c.2235_2249del15"]


def test_all_of_any_of_match_operators(variants_df):
    a = equals(variants_df, "sample", "S1")
    b = equals(variants_df, "type", "SNP")
    assert all_of(a, b).tolist() == (a & b).tolist()
    assert any_of(a, b).tolist() == (a | b).tolist()
    with pytest.raises(ValueError):
        all_of()


def test_matches_treats_missing_as_no_match(variants_df):
    df = variants_df.copy()
    df.loc[0, "cdna"] = None
    mask = matches(df, "cdna", "G>A")
    assert mask.dtype == bool
    assert bool(mask.iloc[0]) is False


def test_unknown_column_raises(variants_df):
    with pytest.raises(KeyError):
        equals(variants_df, "nope", 1)


def test_filter_rows_mask_must_align(variants_df):
    mask = equals(variants_df, "type", "SNP").reset_index(drop=True)
    mask.index = mask.index + 100
    with pytest.raises(ValueError):
        filter_rows(variants_df, mask)


def test_filter_by_selections_all_returns_everything(variants_df):
    out = filter_by_selections(variants_df, default_selections(["sample", "type"]))
    assert len(out) == len(variants_df)


def test_filter_by_selections_ands_columns_and_compares_as_str(variants_df):
    out = filter_by_selections(variants_df, {"sample": "S2", "genome_position": "41197701"})
    assert out["gene"].tolist() == ["BRCA1"]


def test_selection_display():
    assert SELECTION_ALL == "(all)"
    assert is_filtered({"sample": SELECTION_ALL}) is False
    assert is_filtered({"sample": "S1"}) is True
    assert format_selection_display({"sample": SELECTION_ALL}) == "All"
    assert format_selection_display({"sample": "S1", "type": "SNP"}) == "sample=S1, type=SNP"


def test_selection_values_sorted_unique(variants_df):
    assert selection_values(variants_df, "sample") == ["S1", "S2"]


def test_selection_options_start_with_all(variants_df):
    options = selection_options(variants_df, ["sample", "genome_position"])
    assert options["sample"] == [SELECTION_ALL, "S1", "S2"]
    assert options["genome_position"][0] == SELECTION_ALL
    assert "41197701" in options["genome_position"]
    selected = filter_by_selections(variants_df, {"genome_position": options["genome_position"][1]})
    assert len(selected) == 1
