"""Runtime configuration read from the environment."""

import os
from dataclasses import dataclass


def _optional_int(value: str | None) -> int | None:
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass(frozen=True)
class Settings:
    """Server and generation settings.

    Environment variables:
        STARFORGE_SEED: Seed for every generation run (unset for entropy)
        STARFORGE_HOST: Bind address of the HTTP server
        STARFORGE_PORT: Port of the HTTP server
        STARFORGE_LOG_LEVEL: Logging level name
    """

    seed: int | None = None
    host: str = "0.0.0.0"
    port: int = 9000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            seed=_optional_int(os.getenv("STARFORGE_SEED")),
            host=os.getenv("STARFORGE_HOST", cls.host),
            port=int(os.getenv("STARFORGE_PORT", str(cls.port))),
            log_level=os.getenv("STARFORGE_LOG_LEVEL", cls.log_level).upper(),
        )
