"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from opensearch2nix import __version__

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- HTTP --------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("OPENSEARCH2NIX_TIMEOUT", "10.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.getenv(
            "OPENSEARCH2NIX_USER_AGENT", f"opensearch2nix/{__version__}"
        )
    )

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING"))
    # Empty means stdout only.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))


# Module-level singleton -- import this everywhere.
settings = Settings()
