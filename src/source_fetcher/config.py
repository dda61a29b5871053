"""Settings loaded from the environment (and a .env file, if present)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .etherscan.constants import DEFAULT_REQUEST_TIMEOUT

DEFAULT_NETWORK_ID = 1


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    network_id: int = DEFAULT_NETWORK_ID
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


def load_settings() -> Settings:
    """
    Read fetcher settings.

    Environment variables (can also be set in .env file):
        ETHERSCAN_API_KEY          Etherscan API key (optional)
        ETHERSCAN_NETWORK_ID       Network id (default: 1)
        ETHERSCAN_REQUEST_TIMEOUT  HTTP timeout in seconds (default: 10)
    """
    load_dotenv(override=True)
    return Settings(
        api_key=os.getenv('ETHERSCAN_API_KEY') or None,
        network_id=int(os.getenv('ETHERSCAN_NETWORK_ID') or DEFAULT_NETWORK_ID),
        request_timeout=float(os.getenv('ETHERSCAN_REQUEST_TIMEOUT') or DEFAULT_REQUEST_TIMEOUT),
    )
