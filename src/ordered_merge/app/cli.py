from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from ordered_merge.adapters.output_sink import FileOutputSink, StreamOutputSink
from ordered_merge.adapters.sources import FileSource
from ordered_merge.config.factory import build_sources, source_label
from ordered_merge.config.loader import ConfigError, load_config
from ordered_merge.config.models import LoggingConfig, MergeConfig
from ordered_merge.domain.errors import OutOfOrderError
from ordered_merge.kernel.engine import merge
from ordered_merge.kernel.harness import stream
from ordered_merge.observability.messages import LogMessage
from ordered_merge.observability.sinks import JsonlLogSink
from ordered_merge.ports.log_sink import LogSink
from ordered_merge.ports.output_sink import OutputSink

# NOTE: This CLI module is a thin wrapper: config -> sources -> engine -> output sink.
# Merge semantics live in the kernel; nothing here decides ordering.

EXIT_OK = 0
EXIT_OUT_OF_ORDER = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ordered-merge", description="Lazily merge ascending sequences")
    parser.add_argument("--config", required=True, help="Path to YAML config")
    parser.add_argument("--take", type=int, help="Override number of merged values to produce")
    parser.add_argument("--output", help="Override output file path")
    parser.add_argument("--log", choices=["jsonl", "none"], help="Override log sink")
    parser.add_argument("--log-path", help="Override JSONL log file path (implies --log jsonl)")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: MergeConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over config.
    if args.take is not None:
        if args.take < 0:
            raise ConfigError("--take must be non-negative")
        config.take = args.take
    if args.output is not None:
        config.output.path = args.output
    if args.log is not None or args.log_path is not None:
        sink = args.log or ("jsonl" if args.log_path else config.logging.sink)
        path = args.log_path or config.logging.path
        try:
            config.logging = LoggingConfig(sink=sink, path=path)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc


def build_log_sink(config: LoggingConfig) -> LogSink | None:
    if config.sink == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    return None


def build_output_sink(config: MergeConfig) -> OutputSink:
    if config.output.path is None:
        return StreamOutputSink()
    return FileOutputSink(Path(config.output.path), atomic_replace=config.output.atomic_replace)


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config_path = Path(args.config)
    try:
        config = load_config(config_path)
        apply_overrides(config, args)
    except (ConfigError, OSError) as exc:
        print(f"config error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    log_sink = build_log_sink(config.logging)
    try:
        return merge_to_output(config, base_dir=config_path.parent, log_sink=log_sink)
    finally:
        if log_sink is not None:
            log_sink.close()


def merge_to_output(config: MergeConfig, *, base_dir: Path, log_sink: LogSink | None = None) -> int:
    # Output is committed only when the merge completes; see FileOutputSink for what a failed run leaves.
    sources = build_sources(config, base_dir=base_dir)
    labels = [source_label(item, index) for index, item in enumerate(config.sources)]
    output = build_output_sink(config)
    engine = merge(sources, log_sink=log_sink)
    _log(log_sink, "INFO", "merge_started", sources=labels, take=config.take)

    status = EXIT_OK
    completed = False
    try:
        for value in stream(engine, config.take):
            output.write(value)
        completed = True
    except OutOfOrderError as exc:
        label = labels[exc.violation.index]
        _log(log_sink, "ERROR", "merge_failed", source=label, emitted=len(exc.emitted))
        print(
            f"out of order: source {label} yielded {exc.offending_value!r} after {exc.prior_value!r}",
            file=sys.stderr,
        )
        status = EXIT_OUT_OF_ORDER
    except (OSError, ValueError, ArithmeticError) as exc:
        # Missing, undecodable or unparseable input files (FileSourceError is a ValueError).
        _log(log_sink, "ERROR", "input_failed", error=str(exc), emitted=engine.emitted)
        print(f"input error: {exc}", file=sys.stderr)
        status = EXIT_CONFIG_ERROR
    finally:
        output.close(commit=completed)
        for source in sources:
            if isinstance(source, FileSource):
                source.close()

    _log(log_sink, "INFO", "merge_finished", status=status, emitted=engine.emitted, pulls=engine.pull_counts())
    return status


def _log(sink: LogSink | None, level: str, event: str, **fields: object) -> None:
    if sink is not None:
        sink.emit(LogMessage(level=level, event=event, fields=dict(fields)))
