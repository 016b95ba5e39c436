"""Config loading for the CHBS batch tools."""

from __future__ import annotations

from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for 3.10
    import tomli as tomllib

DEFAULT_CONFIG: dict[str, object] = {
    "sequences": {
        "extra": [],
    },
    "output": {
        "data_dir": "results/{dataset}",
        "include_passwords": True,
    },
    "report": {
        "enabled": True,
    },
}


def load_config(path: str | Path) -> dict[str, object]:
    """Load TOML config, merging with defaults."""
    cfg_path = Path(path)
    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    merged: dict[str, object] = {
        "sequences": {**DEFAULT_CONFIG["sequences"], **data.get("sequences", {})},
        "output": {**DEFAULT_CONFIG["output"], **data.get("output", {})},
        "report": {**DEFAULT_CONFIG["report"], **data.get("report", {})},
    }
    _validate_config(merged)
    return merged


def _validate_config(cfg: dict[str, object]) -> None:
    extra = cfg["sequences"]["extra"]
    if not isinstance(extra, list) or any(not isinstance(item, str) or not item for item in extra):
        raise ValueError("sequences.extra must be a list of non-empty strings")

    output = cfg["output"]
    data_dir = output["data_dir"]
    if not isinstance(data_dir, str) or not data_dir:
        raise ValueError("output.data_dir must be a non-empty string")
    if not isinstance(output["include_passwords"], bool):
        raise ValueError("output.include_passwords must be a boolean")

    if not isinstance(cfg["report"]["enabled"], bool):
        raise ValueError("report.enabled must be a boolean")
