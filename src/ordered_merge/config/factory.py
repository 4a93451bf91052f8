from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from pathlib import Path
from typing import Any

from ordered_merge.adapters.producers import counting, fibonacci, triangular
from ordered_merge.adapters.sources import FileSource, IteratorSource
from ordered_merge.config.models import (
    FibonacciSourceConfig,
    FileSourceConfig,
    MergeConfig,
    RangeSourceConfig,
    SourceConfig,
    TriangularSourceConfig,
    ValuesSourceConfig,
)
from ordered_merge.ports.sequence_source import SequenceSource

_PARSERS: dict[str, Callable[[str], Any]] = {
    "int": int,
    "decimal": Decimal,
    "float": float,
    "str": str,
}


def build_source(config: SourceConfig, *, base_dir: Path | None = None) -> SequenceSource:
    # Relative file paths resolve against base_dir (the config file's directory) when given.
    if isinstance(config, RangeSourceConfig):
        return IteratorSource(counting(config.start, config.stop, config.step))
    if isinstance(config, FibonacciSourceConfig):
        return IteratorSource(fibonacci())
    if isinstance(config, TriangularSourceConfig):
        return IteratorSource(triangular())
    if isinstance(config, ValuesSourceConfig):
        return IteratorSource(list(config.values))
    if isinstance(config, FileSourceConfig):
        path = Path(config.path)
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        return FileSource(path=path, parse=_PARSERS[config.value_type], encoding=config.encoding)
    raise TypeError(f"Unsupported source config: {type(config).__name__}")


def build_sources(config: MergeConfig, *, base_dir: Path | None = None) -> list[SequenceSource]:
    return [build_source(item, base_dir=base_dir) for item in config.sources]


def source_label(config: SourceConfig, index: int) -> str:
    return config.name or f"{config.kind}#{index}"
