"""Application configuration, read from environment variables."""

import os
from dataclasses import dataclass
from functools import lru_cache

STORE_BACKENDS = ("memory", "sql")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3002
    allowed_origins: tuple[str, ...] = ("*",)
    static_dir: str = "public"
    game_store: str = "memory"
    database_url: str = "sqlite:///:memory:"
    log_level: str = "INFO"
    debug: bool = False

    def __post_init__(self) -> None:
        if self.game_store not in STORE_BACKENDS:
            raise ValueError(
                f"Unknown game store {self.game_store!r}. Pick one from {','.join(STORE_BACKENDS)}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        env = os.environ
        return cls(
            host=env.get("HOST", cls.host),
            port=int(env.get("PORT", cls.port)),
            allowed_origins=tuple(
                origin.strip()
                for origin in env.get("ALLOWED_ORIGINS", "*").split(",")
                if origin.strip()
            ),
            static_dir=env.get("STATIC_DIR", cls.static_dir),
            game_store=env.get("GAME_STORE", cls.game_store).lower(),
            database_url=env.get("DATABASE_URL", cls.database_url),
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
            debug=_as_bool(env.get("DEBUG", "0")),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
