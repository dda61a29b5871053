"""Etherscan fetcher setup: immutable per-network config and dispatch gate."""

import logging
from dataclasses import dataclass
from typing import Optional

from ..networks import resolve_network
from .constants import DEFAULT_REQUEST_TIMEOUT, INTERVAL_WITH_KEY, INTERVAL_WITHOUT_KEY
from .gate import DispatchGate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetcherConfig:
    """
    Per-network settings, fixed for the lifetime of a fetcher.
    """
    network_id: int
    network_valid: bool
    suffix: Optional[str]
    api_key: str
    interval: float
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def for_network(
        cls,
        network_id: int,
        api_key: Optional[str] = None,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> "FetcherConfig":
        network_valid, suffix = resolve_network(network_id)
        api_key = api_key or ""
        return cls(
            network_id=network_id,
            network_valid=network_valid,
            suffix=suffix,
            api_key=api_key,
            interval=INTERVAL_WITH_KEY if api_key else INTERVAL_WITHOUT_KEY,
            request_timeout=request_timeout,
        )


class EtherscanFetcherBaseMixin:
    def __init__(
        self,
        network_id: int,
        api_key: Optional[str] = None,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        gate: Optional[DispatchGate] = None,
    ):
        """
        Initialize the fetcher for one network.

        Args:
            network_id: Network id the fetcher serves
            api_key: Etherscan API key (optional, raises the rate limit)
            request_timeout: HTTP timeout in seconds
            gate: Dispatch gate to use instead of a fresh one
        """
        self.config = FetcherConfig.for_network(network_id, api_key, request_timeout)
        self.gate = gate or DispatchGate(self.config.interval)
        if not self.config.network_valid:
            logger.warning(f"Etherscan does not serve network {network_id}")

    def is_network_valid(self) -> bool:
        return self.config.network_valid
