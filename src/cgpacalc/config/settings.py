from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    web_mode: bool = False
    port: int = 8550
    title: str = "CGPA Calculator"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            web_mode=_env_flag("CGPACALC_WEB"),
            port=_env_int("PORT", 8550),
            title=os.getenv("CGPACALC_TITLE", "CGPA Calculator"),
            log_level=os.getenv("CGPACALC_LOG_LEVEL", "INFO"),
        )


settings = Settings.from_env()
