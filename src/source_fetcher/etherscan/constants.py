"""Etherscan API constants."""

PROVIDER_NAME = "etherscan"
PROVIDER_DOMAIN = "etherscan.io"

# Etherscan permits 5 requests/sec with an API key, 3/sec without
INTERVAL_WITH_KEY = 0.200
INTERVAL_WITHOUT_KEY = 0.334

ALLOWED_ATTEMPTS = 2
DEFAULT_REQUEST_TIMEOUT = 10


def api_url(suffix: str) -> str:
    return f"https://api{suffix}.{PROVIDER_DOMAIN}/api"
