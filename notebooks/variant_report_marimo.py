"""
Variant & fusion report: marimo notebook

Loads the variant and fusion tables, then walks through the report: derived
columns, projection, filtering, selection, sorting, sampling, grouped
summaries, column unification and charts. Each step is one genotables call.

Run:
  uv run marimo edit notebooks/variant_report_marimo.py
  uv run marimo run notebooks/variant_report_marimo.py

Requires: pip install -e ".[notebook]"
"""

import marimo

__generated_with = "0.19.11"
app = marimo.App(width="full")


@app.cell(hide_code=True)
def _():
    import marimo as mo
    import plotly.graph_objects as go

    from genotables.report.report_builder import FIGURE, build_report
    from genotables.report.report_config import SELECTION_COLUMNS, ReportConfig, parse_seed
    from genotables.tables import filters
    from genotables.tables.derive import augment_variants
    from genotables.tables.schema import get_data_tsv_files, load_fusion_table, load_variant_table
    from genotables.utils.logging import configure_logging

    configure_logging(level="INFO")

    cfg = ReportConfig.load().data
    tsv_files = get_data_tsv_files()
    return (
        FIGURE,
        augment_variants,
        build_report,
        cfg,
        filters,
        go,
        load_fusion_table,
        load_variant_table,
        mo,
        parse_seed,
        SELECTION_COLUMNS,
        tsv_files,
    )


@app.cell
def _(cfg, mo, tsv_files):
    variants_select = mo.ui.dropdown(
        options=tsv_files,
        value=cfg.variants_file if cfg.variants_file in tsv_files else None,
        label="Variant table",
    )
    fusions_select = mo.ui.dropdown(
        options=tsv_files,
        value=cfg.fusions_file if cfg.fusions_file in tsv_files else None,
        label="Fusion table",
    )
    seed_input = mo.ui.text(
        value="" if cfg.random_seed is None else str(cfg.random_seed),
        label="Random seed (empty = unseeded)",
    )
    mo.vstack(
        [
            mo.md("### Variant & fusion report"),
            mo.hstack([variants_select, fusions_select, seed_input], justify="start", gap=1),
        ],
        gap=1,
    )
    return fusions_select, seed_input, variants_select


@app.cell(hide_code=True)
def _(cfg, fusions_select, load_fusion_table, load_variant_table, parse_seed, seed_input, variants_select):
    from dataclasses import replace

    variants = load_variant_table(variants_select.value or cfg.variants_file)
    fusions = load_fusion_table(fusions_select.value or cfg.fusions_file)
    seed = parse_seed(seed_input.value)
    return fusions, replace, seed, variants


@app.cell
def _(SELECTION_COLUMNS, cfg, filters, mo, variants):
    # Single-value selections feeding the report's selection step
    _options = filters.selection_options(variants, SELECTION_COLUMNS)
    selection_dropdowns = mo.ui.dictionary({
        col: mo.ui.dropdown(
            options=opts,
            value=cfg.selections.get(col) if cfg.selections.get(col) in opts else filters.SELECTION_ALL,
            label=col,
        )
        for col, opts in _options.items()
    })
    selection_dropdowns
    return (selection_dropdowns,)


@app.cell
def _(cfg, replace, seed, selection_dropdowns):
    report_cfg = replace(cfg, random_seed=seed, selections=dict(selection_dropdowns.value))
    return (report_cfg,)


@app.cell
def _(augment_variants, filters, mo, variants):
    # Gene picker: the interactive version of the gene membership filter
    gene_pick = mo.ui.multiselect(
        options=filters.selection_values(variants, "gene"),
        label="Genes",
    )
    augmented = augment_variants(variants)
    mo.vstack([mo.md("**Pick genes to inspect**"), gene_pick], gap=1)
    return augmented, gene_pick


@app.cell
def _(augmented, filters, gene_pick, mo):
    _picked = gene_pick.value or []
    _df = filters.filter_rows(augmented, filters.is_in(augmented, "gene", _picked)) if _picked else augmented
    mo.vstack([mo.md(f"**{len(_df)}** variants"), mo.ui.table(_df, selection=None)], gap=1)
    return


@app.cell(hide_code=True)
def _(FIGURE, build_report, fusions, go, mo, report_cfg, variants):
    steps = build_report(variants, fusions, report_cfg)

    blocks = []
    for i, step in enumerate(steps, start=1):
        blocks.append(mo.md(f"#### {i}. {step.title}"))
        if step.description:
            blocks.append(mo.md(step.description))
        if step.kind == FIGURE:
            blocks.append(mo.ui.plotly(go.Figure(step.payload)))
        else:
            blocks.append(mo.ui.table(step.payload, selection=None))
    mo.vstack(blocks, gap=1)
    return


if __name__ == "__main__":
    app.run()
