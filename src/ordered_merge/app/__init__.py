from .cli import apply_overrides, build_parser, merge_to_output, parse_args, run

__all__ = ["apply_overrides", "build_parser", "merge_to_output", "parse_args", "run"]
