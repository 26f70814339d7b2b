"""Client settings read from the environment."""

import os
from dataclasses import dataclass

DEFAULT_API_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT = 10.0
DEFAULT_STORAGE_PATH = "~/.community-market/storage.json"


@dataclass(frozen=True)
class ClientSettings:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    storage_path: str = DEFAULT_STORAGE_PATH

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls(
            api_url=os.getenv("COMMUNITY_MARKET_API_URL", DEFAULT_API_URL),
            timeout=float(os.getenv("COMMUNITY_MARKET_API_TIMEOUT", DEFAULT_TIMEOUT)),
            storage_path=os.getenv("COMMUNITY_MARKET_STORAGE_PATH", DEFAULT_STORAGE_PATH),
        )
