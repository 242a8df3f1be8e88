"""Column contracts and loading for the variant and fusion tables.

Both tables are tab-separated text files with a header row. Column names are
the only contract: required columns must be present, extra columns are kept
as-is, and types are inferred from the text by pandas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import pandas as pd

from genotables.utils.logging import get_logger

logger = get_logger(__name__)

# Bundled sample data (repo-level data/ directory)
DEFAULT_VARIANTS_TSV = "variants.tsv"
DEFAULT_FUSIONS_TSV = "fusions.tsv"

VARIANT_COLUMNS: list[str] = [
    "sample",
    "gene",
    "cdna",
    "chromosome",
    "genome_position",
    "ref",
    "alt",
    "type",
    "vaf",
    "filter",
]

FUSION_COLUMNS: list[str] = [
    "sample",
    "fusion_name",
    "left_gene",
    "right_gene",
    "left_breakpoint",
    "right_breakpoint",
    "junction_reads",
    "spanning_reads",
    "ffpm",
]

# Columns read as text regardless of content (e.g. chromosome "17" vs "X").
_STRING_COLUMNS = {"sample", "gene", "cdna", "chromosome", "ref", "alt", "type", "vaf", "filter"}


class TableSchemaError(ValueError):
    """Raised when a loaded table is missing required columns."""


def get_data_dir() -> Path:
    """Resolve the genotables data/ directory.

    Package layout: <root>/src/genotables/tables/schema.py
    Data: <root>/data/

    data/ lives in the source tree and is not shipped in the wheel, so the
    bundled tables are only found from a checkout or an editable install
    (pip install -e .). Otherwise pass explicit paths to the loaders.
    """
    pkg_root = Path(__file__).resolve().parent.parent.parent.parent
    return pkg_root / "data"


def get_data_tsv_files() -> list[str]:
    """List .tsv filenames in data/ (sorted)."""
    data_dir = get_data_dir()
    if not data_dir.exists():
        return []
    return sorted(f.name for f in data_dir.iterdir() if f.suffix.lower() == ".tsv")


def resolve_table_path(path: Union[str, Path, None], default_name: str) -> Path:
    """Return an existing path for a table.

    A bare filename that does not exist relative to the working directory is
    looked up in data/. None means the bundled default.
    """
    if path is None:
        path = default_name
    p = Path(path)
    if not p.exists() and not p.is_absolute() and p.parent == Path("."):
        p = get_data_dir() / p.name
    if not p.exists():
        raise FileNotFoundError(f"Table not found: {p}")
    return p


def validate_columns(df: pd.DataFrame, required_columns: Sequence[str], table_name: str = "table") -> None:
    """Raise TableSchemaError if any of required_columns is absent from df."""
    missing = [c for c in required_columns if c not in df.columns]
    if missing:
        raise TableSchemaError(
            f"{table_name} is missing required column(s) {missing}; found {list(df.columns)}"
        )


def load_table(
    path: Union[str, Path],
    required_columns: Sequence[str] = (),
    *,
    table_name: str = "table",
) -> pd.DataFrame:
    """Read a tab-separated file with a header row and check its columns.

    Args:
        path: File to read.
        required_columns: Columns that must be present.
        table_name: Name used in error and log messages.

    Returns:
        DataFrame with one row per source record.

    Raises:
        FileNotFoundError: If path does not exist.
        TableSchemaError: If required columns are missing.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Table not found: {path}")
    header = pd.read_csv(path, sep="\t", nrows=0).columns
    dtype = {c: str for c in header if c in _STRING_COLUMNS}
    df = pd.read_csv(path, sep="\t", dtype=dtype, keep_default_na=True)
    validate_columns(df, required_columns, table_name)
    logger.info(f"Loaded {table_name} from {path}: {len(df)} rows x {len(df.columns)} columns")
    return df


def load_variant_table(path: Union[str, Path, None] = None) -> pd.DataFrame:
    """Load the variant table (defaults to data/variants.tsv).

    The default only resolves from a source checkout; see get_data_dir().
    """
    return load_table(
        resolve_table_path(path, DEFAULT_VARIANTS_TSV),
        VARIANT_COLUMNS,
        table_name="variant table",
    )


def load_fusion_table(path: Union[str, Path, None] = None) -> pd.DataFrame:
    """Load the fusion table (defaults to data/fusions.tsv).

    The default only resolves from a source checkout; see get_data_dir().
    """
    return load_table(
        resolve_table_path(path, DEFAULT_FUSIONS_TSV),
        FUSION_COLUMNS,
        table_name="fusion table",
    )
