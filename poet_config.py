"""
YAML configuration for the graph poet command line.

Example poet.yml:

    corpus: corpora/mugar.txt
    representation: vertices
    encoding: utf-8
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from graph import REPRESENTATIONS


class ConfigError(ValueError):
    """The configuration document is malformed."""


@dataclass(frozen=True)
class PoetConfig:
    corpus: Optional[Path] = None
    representation: str = "edges"
    encoding: str = "utf-8"


def load_config(path: Path) -> PoetConfig:
    """
    Load a PoetConfig from a YAML file.

    A relative corpus path is resolved against the config file's directory.
    An empty document gives the defaults.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    known = {f.name for f in fields(PoetConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown keys: {', '.join(map(str, unknown))}")

    representation = str(data.get("representation", "edges"))
    if representation not in REPRESENTATIONS:
        raise ConfigError(
            f"{path}: representation must be one of {', '.join(REPRESENTATIONS)}, "
            f"got {representation!r}"
        )

    corpus = data.get("corpus")
    corpus_path: Optional[Path] = None
    if corpus is not None:
        corpus_path = Path(str(corpus))
        if not corpus_path.is_absolute():
            corpus_path = path.parent / corpus_path

    return PoetConfig(
        corpus=corpus_path,
        representation=representation,
        encoding=str(data.get("encoding", "utf-8")),
    )
