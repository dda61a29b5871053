"""Fetch verified contract sources and normalize them for recompilation."""

from .errors import FetchError, NetworkUnsupportedError, ProviderError, TransportError
from .etherscan import EtherscanFetcher
from .fetcher import Fetcher
from .models import CanonicalSource, CompilerOptions, RawRecord

__all__ = [
    "CanonicalSource",
    "CompilerOptions",
    "EtherscanFetcher",
    "FetchError",
    "Fetcher",
    "NetworkUnsupportedError",
    "ProviderError",
    "RawRecord",
    "TransportError",
]
