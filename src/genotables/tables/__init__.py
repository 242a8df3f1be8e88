"""Loading, transforming and summarizing the variant and fusion tables."""

from genotables.tables.derive import (
    VariantFractionError,
    augment_variants,
    is_deaminated,
    parse_vaf,
)
from genotables.tables.filters import SELECTION_ALL, filter_by_selections, filter_rows
from genotables.tables.frame_ops import (
    arrange,
    as_pandas,
    drop_columns,
    rename_columns,
    sample_rows,
    select_columns,
    unite_columns,
)
from genotables.tables.schema import TableSchemaError, load_fusion_table, load_variant_table
from genotables.tables.summary import deamination_summary, fusion_support_summary, group_summary

__all__ = [
    "SELECTION_ALL",
    "TableSchemaError",
    "VariantFractionError",
    "arrange",
    "as_pandas",
    "augment_variants",
    "deamination_summary",
    "drop_columns",
    "filter_by_selections",
    "filter_rows",
    "fusion_support_summary",
    "group_summary",
    "is_deaminated",
    "load_fusion_table",
    "load_variant_table",
    "parse_vaf",
    "rename_columns",
    "sample_rows",
    "select_columns",
    "unite_columns",
]
