import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_TIMEOUT = "12"  # seconds
DEFAULT_MAX_REDIRECTS = "5"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def get_config() -> dict[str, str]:
    """
    Read scraper settings from environment variables.
    Called lazily so a bad value only fails when it is actually used.
    """
    return {
        "SCRAPER_TIMEOUT": os.getenv("SCRAPER_TIMEOUT", DEFAULT_TIMEOUT),
        "SCRAPER_MAX_REDIRECTS": os.getenv("SCRAPER_MAX_REDIRECTS", DEFAULT_MAX_REDIRECTS),
        "SCRAPER_USER_AGENT": os.getenv("SCRAPER_USER_AGENT", "") or DEFAULT_USER_AGENT,
    }


class _Config:
    """Lazy configuration that only validates when values are actually accessed."""

    def __init__(self) -> None:
        self._config: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._config is None:
            self._config = get_config()
        return self._config

    @property
    def SCRAPER_TIMEOUT(self) -> float:
        """Request timeout in seconds. Must be a positive number."""
        raw = self._load()["SCRAPER_TIMEOUT"]
        try:
            timeout = float(raw)
        except ValueError:
            raise ValueError(f"SCRAPER_TIMEOUT must be a positive number, got '{raw}'") from None
        if timeout <= 0:
            raise ValueError(f"SCRAPER_TIMEOUT must be a positive number, got {timeout}")
        return timeout

    @property
    def SCRAPER_MAX_REDIRECTS(self) -> int:
        """Maximum redirects followed per fetch. Must be a non-negative integer."""
        raw = self._load()["SCRAPER_MAX_REDIRECTS"]
        try:
            redirects = int(raw)
        except ValueError:
            raise ValueError(
                f"SCRAPER_MAX_REDIRECTS must be a non-negative integer, got '{raw}'"
            ) from None
        if redirects < 0:
            raise ValueError(
                f"SCRAPER_MAX_REDIRECTS must be a non-negative integer, got {redirects}"
            )
        return redirects

    @property
    def SCRAPER_USER_AGENT(self) -> str:
        return self._load()["SCRAPER_USER_AGENT"]


_cfg = _Config()

# Declared for type checkers; values are resolved lazily by __getattr__ below.
SCRAPER_TIMEOUT: float
SCRAPER_MAX_REDIRECTS: int
SCRAPER_USER_AGENT: str


# PEP 562: `from jobpost_extractor.config import SCRAPER_TIMEOUT` resolves on first access.
def __getattr__(name: str) -> str | int | float:
    if name == "SCRAPER_TIMEOUT":
        return _cfg.SCRAPER_TIMEOUT
    if name == "SCRAPER_MAX_REDIRECTS":
        return _cfg.SCRAPER_MAX_REDIRECTS
    if name == "SCRAPER_USER_AGENT":
        return _cfg.SCRAPER_USER_AGENT
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
