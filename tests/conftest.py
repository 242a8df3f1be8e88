"""Shared fixtures: small variant and fusion tables, in memory and as TSV files."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest


@pytest.fixture
def variants_df() -> pd.DataFrame:
    """Variant table with the loaded column layout (vaf as percentage strings)."""
    return pd.DataFrame({
        "sample": ["S1", "S1", "S1", "S2", "S2", "S2"],
        "gene": ["TP53", "KRAS", "BRCA1", "BRCA1", "EGFR", "TP53"],
        "cdna": ["c.743G>A", "c.35G>A", "c.68_69delAG", "c.4327C>T", "c.2235_2249del15", "c.818G>A"],
        "chromosome": ["17", "12", "17", "17", "7", "17"],
        "genome_position": [7577538, 25398284, 41276045, 41197701, 55242465, 7577120],
        "ref": ["C", "C", "CT", "C", "GGAATTAAGAGAAGCA", "G"],
        "alt": ["T", "T", "C", "T", "G", "A"],
        "type": ["SNP", "SNP", "INDEL", "SNP", "INDEL", "SNP"],
        "vaf": ["41.2%", "23.5%", "51.3%", "5.6%", "44.1%", "100%"],
        "filter": ["PASS", "PASS", "PASS", "LowQual", "PASS", "PASS"],
    })


@pytest.fixture
def fusions_df() -> pd.DataFrame:
    """Fusion table with the loaded column layout."""
    return pd.DataFrame({
        "sample": ["S1", "S1", "S2"],
        "fusion_name": ["EML4--ALK", "TMPRSS2--ERG", "BCR--ABL1"],
        "left_gene": ["EML4", "TMPRSS2", "BCR"],
        "right_gene": ["ALK", "ERG", "ABL1"],
        "left_breakpoint": ["chr2:42522656:+", "chr21:42880008:-", "chr22:23632600:+"],
        "right_breakpoint": ["chr2:29446394:-", "chr21:39817544:-", "chr9:133729451:+"],
        "junction_reads": [86, 3, 154],
        "spanning_reads": [41, 0, 88],
        "ffpm": [12.84, 0.31, 24.17],
    })


@pytest.fixture
def variants_tsv(tmp_path: Path, variants_df: pd.DataFrame) -> Path:
    path = tmp_path / "variants.tsv"
    variants_df.to_csv(path, sep="\t", index=False)
    return path


@pytest.fixture
def fusions_tsv(tmp_path: Path, fusions_df: pd.DataFrame) -> Path:
    path = tmp_path / "fusions.tsv"
    fusions_df.to_csv(path, sep="\t", index=False)
    return path
