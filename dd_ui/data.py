"""Loading of collections from YAML/JSON files and the bundled samples."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from dd_common.errors import DataLoadError

SAMPLES_DIR = Path(__file__).parent / "samples"


def _read_data_file(path: Path) -> Any:
    if not path.exists():
        raise DataLoadError(f"Collection file not found: {path}", context={"path": path})
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DataLoadError(
            f"Could not parse {path.name}", context={"path": path}, cause=exc
        ) from exc


def load_collection(path: Path | str) -> list[Any]:
    """Load a list of items from a ``.json`` file or a YAML file."""
    resolved = Path(path)
    data = _read_data_file(resolved)
    if data is None:
        return []
    if not isinstance(data, list):
        raise DataLoadError(
            "Collection file must contain a list at the top level.",
            context={"path": resolved, "type": type(data).__name__},
        )
    return data


def load_sample(name: str) -> Any:
    return _read_data_file(SAMPLES_DIR / f"{name}.yml")


def interests_catalog() -> tuple[list[str], dict[str, list[str]]]:
    """Return the interests and the topics offered for each one."""
    data = load_sample("interests")
    return list(data["interests"]), {k: list(v) for k, v in data["topics"].items()}
