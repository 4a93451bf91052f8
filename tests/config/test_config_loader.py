from __future__ import annotations

from pathlib import Path

import pytest

from ordered_merge.config.loader import ConfigError, load_config, parse_config
from ordered_merge.config.models import FileSourceConfig, RangeSourceConfig


def test_load_config_happy_path(tmp_path: Path) -> None:
    path = tmp_path / "merge.yml"
    path.write_text(
        "\n".join(
            [
                "version: 1",
                "take: 5",
                "sources:",
                "  - kind: fibonacci",
                "  - kind: range",
                "    start: 1",
                "    stop: 11",
                "  - kind: file",
                "    path: numbers.txt",
                "    value_type: decimal",
                "output:",
                "  path: out.txt",
                "logging:",
                "  sink: jsonl",
                "  path: merge.jsonl",
            ]
        ),
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.take == 5
    assert [source.kind for source in config.sources] == ["fibonacci", "range", "file"]
    assert isinstance(config.sources[1], RangeSourceConfig)
    assert config.sources[1].stop == 11
    assert isinstance(config.sources[2], FileSourceConfig)
    assert config.output.path == "out.txt"
    assert config.logging.sink == "jsonl"


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "merge.yml"
    path.write_text("", encoding="utf-8")
    config = load_config(path)
    assert config.sources == []
    assert config.take == 10
    assert config.output.path is None
    assert config.logging.sink == "none"


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "merge.yml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_unknown_keys_are_rejected() -> None:
    # Unknown keys fail fast instead of being ignored.
    with pytest.raises(ConfigError):
        parse_config({"take": 1, "sorces": []})
    with pytest.raises(ConfigError):
        parse_config({"sources": [{"kind": "fibonacci", "start": 1}]})


def test_unknown_source_kind_is_rejected() -> None:
    with pytest.raises(ConfigError):
        parse_config({"sources": [{"kind": "primes"}]})


@pytest.mark.parametrize(
    "raw",
    [
        {"take": -1},
        {"sources": [{"kind": "range", "step": 0}]},
        {"sources": [{"kind": "file"}]},
        {"logging": {"sink": "jsonl"}},
    ],
)
def test_invalid_values_are_rejected(raw) -> None:
    with pytest.raises(ConfigError):
        parse_config(raw)
