"""Report app: standalone NiceGUI page showing every genotables report step.

Tables render as AG Grids, charts as Plotly figures, in report order. A seed
input and sample/type selects re-run the report, so the random-sampling steps
can be reproduced and the selection step narrowed.

Run:
    python -m genotables.report_app.report_app

Env vars:
    GENOTABLES_GUI_NATIVE: 1/0 (default 0)
    GENOTABLES_GUI_RELOAD: 1/0 (default 0)
    HOST: bind host (default 127.0.0.1 native, 0.0.0.0 web)
    PORT: bind port (default find_open_port native, 8080 web)
"""

from __future__ import annotations

import os
from dataclasses import replace
from multiprocessing import freeze_support

from nicegui import ui

from genotables.report.report_builder import FIGURE, ReportStep, build_report
from genotables.report.report_config import SELECTION_COLUMNS, ReportConfig, ReportConfigData, parse_seed
from genotables.tables.filters import SELECTION_ALL, selection_options
from genotables.tables.schema import load_fusion_table, load_variant_table
from genotables.utils.gui_defaults import setUpGuiDefaults
from genotables.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

configure_logging()


def _env_bool(name: str, default: bool) -> bool:
    """Parse env var as bool; if unset/invalid returns default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    """Parse env var as int; if unset/invalid returns default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def render_step(step: ReportStep) -> None:
    """Render one step inside an open expansion."""
    with ui.expansion(step.title, value=True).classes("w-full"):
        if step.description:
            ui.label(step.description).classes("text-gray-600")
        if step.kind == FIGURE:
            ui.plotly(step.payload).classes("w-full")
        else:
            ui.label(f"{len(step.payload)} rows").classes("text-gray-500")
            ui.aggrid.from_pandas(step.payload).classes("w-full h-64")


def load_selection_options(cfg: ReportConfigData) -> dict[str, list[str]]:
    """Options for the selection menus; only SELECTION_ALL if the variant table cannot be read."""
    try:
        return selection_options(load_variant_table(cfg.variants_file), SELECTION_COLUMNS)
    except (OSError, ValueError) as e:
        logger.warning(f"No selection options from {cfg.variants_file}: {e}")
        return {col: [SELECTION_ALL] for col in SELECTION_COLUMNS}


def render_report(container: ui.element, cfg: ReportConfigData) -> None:
    """Load both tables, build the report and render it into container."""
    container.clear()
    with container:
        try:
            variants = load_variant_table(cfg.variants_file)
            fusions = load_fusion_table(cfg.fusions_file)
            steps = build_report(variants, fusions, cfg)
        except Exception as e:
            logger.exception("Failed to build report: %s", e)
            ui.label(f"Failed to build report: {e}").classes("text-negative")
            return
        for step in steps:
            render_step(step)


@ui.page("/")
def home() -> None:
    """Home page: seed and selection controls + all report steps."""
    setUpGuiDefaults('text-sm')
    ui.page_title("genotables report")

    cfg = ReportConfig.load().data
    options = load_selection_options(cfg)

    with ui.header().classes("items-center justify-between").style(
        "min-height: 36px; height: 36px; padding: 0 8px;"
    ):
        ui.label("Variant & fusion report").classes("!text-lg font-bold text-white")

    with ui.column().classes("w-full gap-4 p-4"):
        with ui.row().classes("items-center gap-2"):
            seed_input = ui.number("Random seed (blank = unseeded)", value=cfg.random_seed, format="%d")
            selects = {}
            for col, col_options in options.items():
                current = cfg.selections.get(col, SELECTION_ALL)
                selects[col] = ui.select(
                    col_options,
                    value=current if current in col_options else SELECTION_ALL,
                    label=col,
                ).classes("w-40")
            rerun_btn = ui.button("Re-run")
        report_container = ui.column().classes("w-full gap-2")

    def _rerun() -> None:
        try:
            seed = parse_seed(seed_input.value)
        except ValueError as e:
            ui.notify(str(e), type="warning")
            return
        selections = {col: sel.value for col, sel in selects.items()}
        render_report(report_container, replace(cfg, random_seed=seed, selections=selections))

    rerun_btn.on_click(_rerun)
    render_report(report_container, cfg)


def main(*, reload: bool | None = None, native_bool: bool | None = None) -> None:
    """Start the report app.

    Env vars (used when arg is None):
      - GENOTABLES_GUI_NATIVE: 1/0
      - GENOTABLES_GUI_RELOAD: 1/0
      - HOST: bind host
      - PORT: bind port
    """
    native_bool = _env_bool("GENOTABLES_GUI_NATIVE", False) if native_bool is None else native_bool
    reload = _env_bool("GENOTABLES_GUI_RELOAD", False) if reload is None else reload

    from nicegui import native as native_module
    if native_bool:
        port = _env_int("PORT", native_module.find_open_port())
    else:
        port = _env_int("PORT", 8080)

    host = os.getenv("HOST", "127.0.0.1" if native_bool else "0.0.0.0")

    logger.info("Starting report app: host=%s port=%s reload=%s native=%s", host, port, reload, native_bool)

    run_kwargs: dict = {
        "host": host,
        "port": port,
        "reload": reload,
        "native": native_bool,
        "title": "genotables report",
    }
    if native_bool:
        run_kwargs["window_size"] = (1200, 800)
    ui.run(**run_kwargs)


if __name__ in {"__main__", "__mp_main__"}:
    freeze_support()
    main()
