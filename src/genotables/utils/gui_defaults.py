"""Set up default classes and props for NiceGUI widgets used by the report app."""

from __future__ import annotations

from nicegui import ui

from genotables.utils.logging import get_logger

logger = get_logger(__name__)


def setUpGuiDefaults(text_size: str = 'text-base'):
    """Set up default classes and props for the ui elements the report app uses.

    Args:
        text_size: Tailwind CSS text size class ('text-xs', 'text-sm',
                   'text-base', 'text-lg').
    """
    # map tailwind to quasar size
    text_size_quasar = {
        "text-xs": "xs",
        "text-sm": "sm",
        "text-base": "md",
        "text-lg": "lg",
    }[text_size]

    logger.debug(f'using classes text_size:"{text_size}" text_size_quasar:{text_size_quasar}')

    ui.label.default_classes(f"{text_size} select-text")
    ui.label.default_props("dense")
    #
    ui.button.default_classes(text_size)
    ui.button.default_props("dense")
    #
    ui.number.default_classes(text_size)
    ui.number.default_props("dense")
    #
    ui.select.default_classes(text_size)
    ui.select.default_props("dense")
    #
    ui.expansion.default_classes(text_size)
    ui.expansion.default_props("dense")
