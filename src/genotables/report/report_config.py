"""
Report config persistence (platformdirs + JSON).

Persisted items (schema v1):
- variants_file / fusions_file: table paths (bare names are looked up in data/)
- sample_n / sample_frac: sizes of the two random-sampling steps
- random_seed: seed for the sampling steps; None = different draw every run
- genes_of_interest: gene set used by the membership filter steps
- theme_template: Plotly template name for report charts
- selections: {column: value} for the selection step; "(all)" = no filter

Behavior:
- If config file missing or unreadable -> defaults are used
- If schema_version mismatches:
  - default: reset to defaults
  - optional: keep loaded but update version
- Unknown keys in loaded JSON are ignored with warnings
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from platformdirs import user_config_dir

from genotables.tables.filters import default_selections
from genotables.tables.schema import DEFAULT_FUSIONS_TSV, DEFAULT_VARIANTS_TSV
from genotables.utils.logging import get_logger

logger = get_logger(__name__)

# Increment when you make a breaking change to the on-disk JSON schema.
SCHEMA_VERSION: int = 1

DEFAULT_GENES_OF_INTEREST = ["TP53", "KRAS", "BRCA1", "EGFR"]

# Columns offered as single-value selections in the notebook and the app
SELECTION_COLUMNS = ["sample", "type"]


@dataclass
class ReportConfigData:
    """JSON-serializable config payload. Keep fields JSON-friendly."""
    schema_version: int = SCHEMA_VERSION
    variants_file: str = DEFAULT_VARIANTS_TSV
    fusions_file: str = DEFAULT_FUSIONS_TSV
    sample_n: int = 5
    sample_frac: float = 0.25
    random_seed: Optional[int] = None
    genes_of_interest: list[str] = field(default_factory=lambda: list(DEFAULT_GENES_OF_INTEREST))
    theme_template: str = "simple_white"
    selections: dict[str, str] = field(default_factory=lambda: default_selections(SELECTION_COLUMNS))

    def to_json_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "schema_version": self.schema_version,
            "variants_file": self.variants_file,
            "fusions_file": self.fusions_file,
            "sample_n": self.sample_n,
            "sample_frac": self.sample_frac,
            "random_seed": self.random_seed,
            "genes_of_interest": list(self.genes_of_interest),
            "theme_template": self.theme_template,
            "selections": dict(self.selections),
        }

    @classmethod
    def from_json_dict(cls, d: Dict[str, Any]) -> "ReportConfigData":
        """
        Tolerant loader:
        - ignores unknown keys
        - tolerates partially missing or malformed values (defaults used)
        """
        defaults = cls()
        schema_version = int(d.get("schema_version", -1))

        sample_n = defaults.sample_n
        try:
            sample_n = max(0, int(d.get("sample_n", sample_n)))
        except (TypeError, ValueError):
            logger.warning(f"sample_n is not an int: {d.get('sample_n')!r}, using {sample_n}")

        sample_frac = defaults.sample_frac
        try:
            sample_frac = max(0.0, min(1.0, float(d.get("sample_frac", sample_frac))))
        except (TypeError, ValueError):
            logger.warning(f"sample_frac is not a number: {d.get('sample_frac')!r}, using {sample_frac}")

        random_seed = d.get("random_seed")
        if random_seed is not None:
            try:
                random_seed = int(random_seed)
            except (TypeError, ValueError):
                logger.warning(f"random_seed is not an int: {random_seed!r}, using None")
                random_seed = None

        genes = d.get("genes_of_interest", defaults.genes_of_interest)
        if not isinstance(genes, list):
            logger.warning("genes_of_interest is not a list, using defaults")
            genes = defaults.genes_of_interest

        selections = d.get("selections", defaults.selections)
        if not isinstance(selections, dict):
            logger.warning("selections is not a dict, using defaults")
            selections = defaults.selections

        known_keys = {
            "schema_version", "variants_file", "fusions_file", "sample_n", "sample_frac",
            "random_seed", "genes_of_interest", "theme_template", "selections",
        }
        for key in d.keys():
            if key not in known_keys:
                logger.warning(f"Unknown key '{key}' in report config, ignoring")

        return cls(
            schema_version=schema_version,
            variants_file=str(d.get("variants_file", defaults.variants_file)),
            fusions_file=str(d.get("fusions_file", defaults.fusions_file)),
            sample_n=sample_n,
            sample_frac=sample_frac,
            random_seed=random_seed,
            genes_of_interest=[str(g) for g in genes],
            theme_template=str(d.get("theme_template", defaults.theme_template)),
            selections={str(k): str(v) for k, v in selections.items()},
        )


def parse_seed(value: Any) -> Optional[int]:
    """Seed from a GUI field: blank or None -> None (unseeded), otherwise an int >= 0.

    Raises:
        ValueError: If value is not a whole non-negative number.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    seed = float(value)
    if not seed.is_integer() or seed < 0:
        raise ValueError(f"Random seed must be a whole number >= 0, got {value!r}")
    return int(seed)


class ReportConfig:
    """
    Manager for loading/saving ReportConfigData to disk.
    """

    def __init__(self, *, path: Path, data: Optional[ReportConfigData] = None):
        self.path = path
        self.data = data if data is not None else ReportConfigData()

    @staticmethod
    def default_config_path(
        app_name: str = "genotables",
        filename: str = "report_config.json",
        app_author: str | None = None,
    ) -> Path:
        """
        Determine OS-appropriate per-user config path.

        macOS:   ~/Library/Application Support/genotables/report_config.json
        Linux:   ~/.config/genotables/report_config.json
        Windows: %APPDATA%\\genotables\\report_config.json
        """
        return Path(user_config_dir(app_name, app_author)) / filename

    @classmethod
    def load(
        cls,
        *,
        config_path: Optional[Path] = None,
        app_name: str = "genotables",
        filename: str = "report_config.json",
        app_author: str | None = None,
        schema_version: int = SCHEMA_VERSION,
        reset_on_version_mismatch: bool = True,
        create_if_missing: bool = False,
    ) -> "ReportConfig":
        """
        Load config from disk.

        If file doesn't exist or is unreadable -> defaults.
        If schema mismatch:
          - reset_on_version_mismatch=True -> defaults
          - else -> keep loaded but overwrite schema_version

        If create_if_missing=True and file is missing -> immediately write defaults.
        """
        path = config_path or cls.default_config_path(app_name=app_name, filename=filename, app_author=app_author)
        default_data = ReportConfigData(schema_version=schema_version)

        try:
            parsed = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug(f"Report config file not found at {path}, using defaults")
            cfg = cls(path=path, data=default_data)
            if create_if_missing:
                cfg.save()
            return cfg
        except json.JSONDecodeError as e:
            logger.warning(f"Report config file at {path} is not valid JSON: {e}, using defaults")
            return cls(path=path, data=default_data)
        except OSError as e:
            logger.warning(f"Error reading report config from {path}: {e}, using defaults")
            return cls(path=path, data=default_data)

        if not isinstance(parsed, dict):
            logger.warning(f"Report config file at {path} does not contain a dict, using defaults")
            return cls(path=path, data=default_data)

        loaded = ReportConfigData.from_json_dict(parsed)
        if int(loaded.schema_version) != int(schema_version):
            if reset_on_version_mismatch:
                logger.warning(
                    f"Report config schema version mismatch: loaded={loaded.schema_version}, "
                    f"expected={schema_version}, resetting to defaults"
                )
                return cls(path=path, data=default_data)
            loaded.schema_version = int(schema_version)

        return cls(path=path, data=loaded)

    def save(self) -> None:
        """Write config to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self.data.to_json_dict(), indent=2), encoding="utf-8")
            logger.info(f"Saved report config to {self.path}")
        except OSError as e:
            logger.error(f"Error saving report config to {self.path}: {e}")
            raise
