from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class RangeSourceConfig(BaseModel):
    # Arithmetic range; omitting stop makes it unbounded.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["range"]
    name: str | None = None
    start: int = 0
    stop: int | None = None
    step: int = Field(default=1, gt=0)


class FibonacciSourceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["fibonacci"]
    name: str | None = None


class TriangularSourceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["triangular"]
    name: str | None = None


class ValuesSourceConfig(BaseModel):
    # Inline finite list; ordering is checked at merge time, not here.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["values"]
    name: str | None = None
    values: list[Any] = Field(default_factory=list)


class FileSourceConfig(BaseModel):
    # One value per line; value_type selects the line parser.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["file"]
    name: str | None = None
    path: str
    value_type: Literal["int", "decimal", "float", "str"] = "int"
    encoding: str = "utf-8"


SourceConfig = Annotated[
    Union[
        RangeSourceConfig,
        FibonacciSourceConfig,
        TriangularSourceConfig,
        ValuesSourceConfig,
        FileSourceConfig,
    ],
    Field(discriminator="kind"),
]


class OutputConfig(BaseModel):
    # Output file path; stdout when omitted.
    model_config = ConfigDict(extra="forbid")
    path: str | None = None
    atomic_replace: bool = False


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["jsonl", "none"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class MergeConfig(BaseModel):
    # MergeConfig is the top-level typed view of a merge run.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    take: int = Field(default=10, ge=0)
    sources: list[SourceConfig] = Field(default_factory=list)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
