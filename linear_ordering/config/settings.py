"""
Application settings loaded from config.json.
"""

import json
from pathlib import Path

_CONFIG_PATH = Path(__file__).parent / "config.json"

DATA_LAYOUTS = ("by_variable", "by_observation")


def _load_config() -> dict:
    with open(_CONFIG_PATH, encoding="utf-8") as f:
        return json.load(f)


_config = _load_config()

# Expose as module-level constants (snake_case in JSON → UPPER for Python)
DATA_LAYOUT = _config["data_layout"]
ENCODING = _config["encoding"]
DECIMAL_PLACES = int(_config["decimal_places"])
DEFAULT_RESULTS_FILE = _config["default_results_file"]
LOG_LEVEL = _config["log_level"]

if DATA_LAYOUT not in DATA_LAYOUTS:
    raise ValueError(
        f"Invalid data_layout '{DATA_LAYOUT}' in {_CONFIG_PATH}. "
        f"Use one of {DATA_LAYOUTS}."
    )
