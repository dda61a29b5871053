"""Etherscan source provider."""

from .base import FetcherConfig
from .classifier import classify
from .fetcher import EtherscanFetcher
from .gate import DispatchGate

__all__ = ["DispatchGate", "EtherscanFetcher", "FetcherConfig", "classify"]
