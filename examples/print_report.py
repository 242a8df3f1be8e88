"""Print the variant & fusion report to the terminal.

Run:
    python examples/print_report.py [variants.tsv] [fusions.tsv]
"""

import sys

from genotables.report.report_builder import build_report, render_text
from genotables.report.report_config import ReportConfig
from genotables.tables.schema import load_fusion_table, load_variant_table
from genotables.utils.logging import configure_logging

configure_logging(level="INFO")

cfg = ReportConfig.load().data
variants_path = sys.argv[1] if len(sys.argv) > 1 else cfg.variants_file
fusions_path = sys.argv[2] if len(sys.argv) > 2 else cfg.fusions_file

variants = load_variant_table(variants_path)
fusions = load_fusion_table(fusions_path)

print(render_text(build_report(variants, fusions, cfg)))
