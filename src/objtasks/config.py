from __future__ import annotations

import os
from dataclasses import dataclass, field

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class JsonOptions:
    """Encoder settings for :func:`objtasks.jsonio.to_json`.

    The defaults give compact output with no whitespace between tokens.
    """

    indent: int | None = None
    separators: tuple[str, str] = (",", ":")
    ensure_ascii: bool = False


@dataclass(frozen=True)
class ObjtasksConfig:
    json: JsonOptions = field(default_factory=JsonOptions)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ObjtasksConfig:
        """Build a config from ``OBJTASKS_*`` environment variables.

        Raises ValueError for a non-integer indent or an unknown log level.
        """
        env = os.environ if environ is None else environ
        json_options = JsonOptions()
        raw_indent = env.get("OBJTASKS_JSON_INDENT", "").strip()
        if raw_indent:
            try:
                indent = int(raw_indent)
            except ValueError:
                raise ValueError(
                    f"OBJTASKS_JSON_INDENT must be an integer, got {raw_indent!r}"
                ) from None
            # Pretty-printed output gets the usual ", " / ": " separators.
            json_options = JsonOptions(indent=indent, separators=(",", ": "))
        log_level = env.get("OBJTASKS_LOG_LEVEL", "").strip().upper() or "WARNING"
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"OBJTASKS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )
        return cls(json=json_options, log_level=log_level)
