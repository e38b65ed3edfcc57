import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from ``SGA_*`` environment variables."""
    env = os.environ if environ is None else environ

    origins_raw = env.get("SGA_CORS_ORIGINS", "*")
    origins = [origin.strip() for origin in origins_raw.split(",") if origin.strip()]

    port_raw = env.get("SGA_PORT", "8000")
    try:
        port = int(port_raw)
    except ValueError:
        raise ValueError(f"SGA_PORT must be an integer, got {port_raw!r}") from None

    log_level = env.get("SGA_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"SGA_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
        )

    return Settings(
        cors_origins=origins or ["*"],
        log_level=log_level,
        host=env.get("SGA_HOST", "127.0.0.1"),
        port=port,
    )
