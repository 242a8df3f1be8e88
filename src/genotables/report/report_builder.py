"""Build the variant/fusion report as an ordered list of steps.

The report is a linear script: both tables are loaded once, then each step
applies one transform (or chart) and yields a table or a Plotly figure dict.
Steps are independent and never modify the loaded tables. Either table may be
handed over as a pandas or a polars DataFrame. The marimo
notebook, the NiceGUI app and ``render_text`` all render the same list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import pandas as pd

from genotables.plotting.figure_generator import deamination_bar, fusion_support_scatter, vaf_scatter
from genotables.plotting.theme import ReportTheme
from genotables.report.report_config import ReportConfigData
from genotables.tables import filters
from genotables.tables.derive import augment_variants
from genotables.tables.frame_ops import (
    arrange,
    as_pandas,
    drop_columns,
    sample_rows,
    select_columns,
    unite_columns,
)
from genotables.tables.summary import deamination_summary, fusion_support_summary, group_stats_table
from genotables.utils.logging import get_logger

logger = get_logger(__name__)

TABLE = "table"
FIGURE = "figure"

# Number of rows shown for the raw table previews
PREVIEW_ROWS = 10


@dataclass
class ReportStep:
    """One rendered block of the report.

    payload is a DataFrame for kind == "table" and a Plotly figure dict for
    kind == "figure".
    """
    title: str
    kind: str
    payload: Union[pd.DataFrame, dict]
    description: str = ""


def _table(title: str, df: pd.DataFrame, description: str = "") -> ReportStep:
    return ReportStep(title=title, kind=TABLE, payload=df, description=description)


def _figure(title: str, fig: dict, description: str = "") -> ReportStep:
    return ReportStep(title=title, kind=FIGURE, payload=fig, description=description)


def build_report(
    variants: pd.DataFrame,
    fusions: pd.DataFrame,
    config: Optional[ReportConfigData] = None,
) -> list[ReportStep]:
    """Run every report step over the two loaded tables.

    Args:
        variants: Variant table as loaded by load_variant_table() (pandas or polars).
        fusions: Fusion table as loaded by load_fusion_table() (pandas or polars).
        config: Sampling sizes, seed, gene set, selections and theme; defaults if None.

    Returns:
        Steps in display order.
    """
    cfg = config or ReportConfigData()
    variants = as_pandas(variants)
    fusions = as_pandas(fusions)
    theme = ReportTheme(template=cfg.theme_template)
    genes = set(cfg.genes_of_interest)
    steps: list[ReportStep] = []

    logger.info(
        f"build_report: variants={len(variants)} fusions={len(fusions)} "
        f"sample_n={cfg.sample_n} sample_frac={cfg.sample_frac} random_seed={cfg.random_seed}"
    )

    # Loaded tables
    steps.append(_table("Variant table", variants.head(PREVIEW_ROWS), f"First {PREVIEW_ROWS} of {len(variants)} variants."))
    steps.append(_table("Fusion table", fusions.head(PREVIEW_ROWS), f"First {PREVIEW_ROWS} of {len(fusions)} fusion calls."))

    # Column derivation
    augmented = augment_variants(variants)
    steps.append(_table(
        "Derived columns",
        select_columns(augmented, ["sample", "variant_id", "vaf", "vaf_numeric", "deaminated"]),
        "variant_id = gene:cDNA change; vaf_numeric parsed from the percentage string; "
        "deaminated = Yes for C>T and G>A.",
    ))

    # Projection
    steps.append(_table(
        "Select columns",
        select_columns(augmented, ["sample", "gene", "cdna", "type", "vaf_numeric"]),
    ))
    steps.append(_table(
        "Drop columns",
        drop_columns(variants, ["chromosome", "genome_position", "ref", "alt"]),
    ))
    steps.append(_table(
        "Select and rename",
        select_columns(augmented, ["sample", "gene", "type"], rename={"type": "variant_type"}),
    ))

    # Row filtering
    steps.append(_table(
        "Filter: SNPs",
        filters.filter_rows(variants, filters.equals(variants, "type", "SNP")),
    ))
    steps.append(_table(
        "Filter: genes of interest",
        filters.filter_rows(variants, filters.is_in(variants, "gene", genes)),
        ", ".join(sorted(genes)),
    ))
    steps.append(_table(
        "Filter: deletions",
        filters.filter_rows(variants, filters.matches(variants, "cdna", "del")),
        "cDNA change contains 'del'.",
    ))
    steps.append(_table(
        "Filter: genes of interest with C>T or G>A",
        filters.filter_rows(
            variants,
            filters.is_in(variants, "gene", genes) & filters.matches(variants, "cdna", r"C>T|G>A"),
        ),
    ))
    steps.append(_table(
        "Filter: passing SNPs or any INDEL outside genes of interest",
        filters.filter_rows(
            variants,
            (
                (filters.equals(variants, "type", "SNP") & filters.equals(variants, "filter", "PASS"))
                | filters.equals(variants, "type", "INDEL")
            )
            & ~filters.is_in(variants, "gene", genes),
        ),
    ))

    # Single-value selections (sample, type)
    selected = filters.filter_by_selections(variants, cfg.selections)
    steps.append(_table(
        f"Selection: {filters.format_selection_display(cfg.selections)}",
        selected,
        f"{len(selected)} of {len(variants)} variants."
        if filters.is_filtered(cfg.selections)
        else "No selection active; every variant is shown.",
    ))

    # Sorting
    steps.append(_table(
        "Sort by VAF (descending)",
        select_columns(arrange(augmented, "vaf_numeric", descending=True), ["sample", "variant_id", "vaf_numeric"]),
    ))
    steps.append(_table(
        "Sort by sample, then position",
        select_columns(
            arrange(variants, ["sample", "genome_position"]),
            ["sample", "gene", "chromosome", "genome_position"],
        ),
    ))

    # Random sampling
    n = min(cfg.sample_n, len(variants))
    seed_note = "unseeded" if cfg.random_seed is None else f"seed {cfg.random_seed}"
    steps.append(_table(
        f"Random sample: {n} rows",
        sample_rows(variants, n=n, random_state=cfg.random_seed),
        f"Drawn without replacement ({seed_note}).",
    ))
    steps.append(_table(
        f"Random sample: {cfg.sample_frac:.0%} of rows",
        sample_rows(variants, frac=cfg.sample_frac, random_state=cfg.random_seed),
        f"Drawn without replacement ({seed_note}).",
    ))

    # Grouped aggregation
    deam = deamination_summary(augmented)
    steps.append(_table(
        "Deamination summary",
        deam,
        "Variants and mean VAF per sample, split by C>T/G>A status.",
    ))
    steps.append(_table(
        "VAF statistics by sample",
        group_stats_table(augmented, "sample", "vaf_numeric"),
        "Unrounded; std and sem use ddof=1.",
    ))

    # Column unification
    steps.append(_table(
        "Unite variant key",
        unite_columns(
            variants,
            ["gene", "chromosome", "genome_position", "ref", "alt"],
            "variant_key",
            sep="-",
        ),
    ))

    # Fusions
    steps.append(_table(
        "Fusion calls per sample",
        arrange(fusion_support_summary(fusions), ["count", "sample"], descending=[True, False]),
    ))
    steps.append(_table(
        "Fusions by junction support",
        select_columns(
            arrange(fusions, "junction_reads", descending=True),
            ["sample", "fusion_name", "junction_reads", "spanning_reads", "ffpm"],
        ),
    ))

    # Charts
    steps.append(_figure("Deamination by sample", deamination_bar(deam, value="count", theme=theme)))
    steps.append(_figure("Mean VAF by deamination status", deamination_bar(deam, value="mean_vaf", theme=theme)))
    steps.append(_figure("VAF by genome position", vaf_scatter(augmented, theme=theme)))
    steps.append(_figure(
        "Fusion read support",
        fusion_support_scatter(fusions, theme=theme),
        "Log-log axes; calls with zero support are not shown.",
    ))

    logger.info(f"build_report: {len(steps)} steps")
    return steps


def render_text(steps: list[ReportStep], *, max_rows: int = 20) -> str:
    """Plain-text rendering of a report for terminals and logs."""
    blocks: list[str] = []
    for i, step in enumerate(steps, start=1):
        lines = [f"--- {i}. {step.title} ---"]
        if step.description:
            lines.append(step.description)
        if step.kind == TABLE:
            df = step.payload
            lines.append(f"Shape: {df.shape}")
            lines.append(df.head(max_rows).to_string(index=False))
        else:
            traces = step.payload.get("data", [])
            names = ", ".join(str(t.get("name", "")) for t in traces)
            lines.append(f"[figure: {len(traces)} trace(s): {names}]")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
