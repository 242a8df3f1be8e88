"""Column derivation for the variant table.

Adds the synthesized columns the report works with:

- ``variant_id``: gene and coding-DNA change, e.g. ``"TP53:c.743G>A"``
- ``vaf_numeric``: the percentage string ``vaf`` parsed to a float
- ``deaminated``: ``"Yes"`` for C>T / G>A substitutions, else ``"No"``

Every function returns a new DataFrame; inputs are never modified.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from genotables.utils.logging import get_logger

logger = get_logger(__name__)

# (ref, alt) pairs characteristic of cytosine deamination artifacts
DEAMINATION_SUBSTITUTIONS = {("C", "T"), ("G", "A")}

DEAMINATED_YES = "Yes"
DEAMINATED_NO = "No"


class VariantFractionError(ValueError):
    """Raised when a variant fraction string cannot be parsed."""


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def parse_vaf(value: Any) -> float:
    """Parse a percentage string like ``"23.5%"`` to ``23.5``.

    Numbers pass through as float. Missing values give NaN.

    Raises:
        VariantFractionError: If the value is not a number with an optional
            trailing percent sign.
    """
    if _is_missing(value):
        return float("nan")
    if isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
        return float(value)
    text = str(value).strip()
    if text.endswith("%"):
        text = text[:-1].strip()
    try:
        return float(text)
    except ValueError:
        raise VariantFractionError(f"Cannot parse variant fraction {value!r}") from None


def vaf_to_numeric(values: pd.Series) -> pd.Series:
    """Vectorised parse_vaf; keeps the index of values."""
    parsed = [parse_vaf(v) for v in values]
    return pd.Series(parsed, index=values.index, dtype=float, name=values.name)


def is_deaminated(ref: Any, alt: Any) -> bool:
    """True for C>T and G>A substitutions (case-insensitive)."""
    if _is_missing(ref) or _is_missing(alt):
        return False
    return (str(ref).strip().upper(), str(alt).strip().upper()) in DEAMINATION_SUBSTITUTIONS


def add_variant_id(
    df: pd.DataFrame,
    *,
    gene_col: str = "gene",
    cdna_col: str = "cdna",
    into: str = "variant_id",
    sep: str = ":",
) -> pd.DataFrame:
    """Add ``into`` = gene + sep + coding-DNA change."""
    out = df.copy()
    out[into] = out[gene_col].astype(str) + sep + out[cdna_col].astype(str)
    return out


def add_vaf_numeric(
    df: pd.DataFrame,
    *,
    vaf_col: str = "vaf",
    into: str = "vaf_numeric",
) -> pd.DataFrame:
    """Add ``into`` as the float form of the percentage column ``vaf_col``."""
    out = df.copy()
    out[into] = vaf_to_numeric(out[vaf_col])
    return out


def add_deaminated(
    df: pd.DataFrame,
    *,
    ref_col: str = "ref",
    alt_col: str = "alt",
    into: str = "deaminated",
) -> pd.DataFrame:
    """Add ``into`` = "Yes" for C>T / G>A rows, "No" otherwise."""
    out = df.copy()
    ref = out[ref_col].astype("string").str.strip().str.upper()
    alt = out[alt_col].astype("string").str.strip().str.upper()
    mask = pd.Series(False, index=out.index)
    for r, a in DEAMINATION_SUBSTITUTIONS:
        mask |= ((ref == r) & (alt == a)).fillna(False).astype(bool)
    out[into] = np.where(mask, DEAMINATED_YES, DEAMINATED_NO)
    return out


def augment_variants(df: pd.DataFrame) -> pd.DataFrame:
    """Add variant_id, vaf_numeric and deaminated to a variant table."""
    out = add_variant_id(df)
    out = add_vaf_numeric(out)
    out = add_deaminated(out)
    logger.debug(
        f"augment_variants: rows={len(out)}, deaminated={int((out['deaminated'] == DEAMINATED_YES).sum())}"
    )
    return out
