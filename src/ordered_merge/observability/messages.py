from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True, slots=True)
class LogMessage:
    # One merge event: `event` is a stable snake_case name, `fields` the event payload.
    level: str
    event: str
    fields: dict[str, object] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    def __post_init__(self) -> None:
        if self.level not in LEVELS:
            raise ValueError(f"Unknown log level {self.level!r}; expected one of {LEVELS}")
        if not self.event:
            raise ValueError("LogMessage requires a non-empty event")

    def to_record(self) -> dict[str, object]:
        return {
            "ts": self.timestamp.isoformat().replace("+00:00", "Z"),
            "level": self.level,
            "event": self.event,
            **{f"f_{key}" if key in ("ts", "level", "event") else key: value for key, value in self.fields.items()},
        }
