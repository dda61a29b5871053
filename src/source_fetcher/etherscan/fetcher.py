"""Etherscan fetcher composed from setup and transport mixins."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, Optional, Union

from ..errors import FetchError, NetworkUnsupportedError
from ..fetcher import Fetcher
from ..models import CanonicalSource
from .base import EtherscanFetcherBaseMixin
from .classifier import classify
from .constants import PROVIDER_NAME
from .transport import EtherscanFetcherTransportMixin

logger = logging.getLogger(__name__)

BatchResult = Union[CanonicalSource, None, FetchError]


class EtherscanFetcher(EtherscanFetcherBaseMixin, EtherscanFetcherTransportMixin, Fetcher):
    """Fetches verified sources from Etherscan for one network."""

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    @classmethod
    def for_network_id(cls, network_id: int, **kwargs) -> "EtherscanFetcher":
        return cls(network_id, **kwargs)

    def fetch_sources_for_address(self, address: str) -> Optional[CanonicalSource]:
        """
        Fetch the verified sources of one contract.

        Args:
            address: Contract address

        Returns:
            Canonical source structure, or None if the contract is not verified

        Raises:
            NetworkUnsupportedError: The fetcher's network is not served by Etherscan
            FetchError: Both attempts failed (the last error is raised)
        """
        if not self.config.network_valid:
            raise NetworkUnsupportedError(self.config.network_id)

        response = self._get_successful_response(address)
        if not response.result:
            logger.warning(f"Etherscan returned no records for {address}")
            return None

        source = classify(response.result[0])
        if source is None:
            logger.info(f"No verified source for {address}")
        else:
            logger.info(
                f"Fetched {len(source.sources)} source file(s) for {address} "
                f"({source.options.language} {source.options.version})"
            )
        return source

    def fetch_sources_for_addresses(
        self,
        addresses: Iterable[str],
        max_workers: int = 4,
    ) -> Dict[str, BatchResult]:
        """
        Fetch several contracts in parallel.

        All workers share this fetcher's dispatch gate, so the rate limit holds
        across threads. Failures are collected per address instead of raised.

        Args:
            addresses: Contract addresses
            max_workers: Maximum concurrent fetches

        Returns:
            Dictionary mapping address -> CanonicalSource, None or the FetchError raised
        """
        addresses = list(dict.fromkeys(addresses))
        results: Dict[str, BatchResult] = {}
        if not addresses:
            return results

        max_workers = max(1, min(max_workers, len(addresses)))
        logger.info(f"Fetching {len(addresses)} contracts from {self.name} ({max_workers} workers)...")
        t_start = time.time()

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {executor.submit(self.fetch_sources_for_address, addr): addr
                       for addr in addresses}
            for future in as_completed(futures):
                addr = futures[future]
                try:
                    results[addr] = future.result()
                except FetchError as e:
                    logger.warning(f"  [{addr[:10]}...] ✗ {e}")
                    results[addr] = e

        failed = sum(1 for value in results.values() if isinstance(value, FetchError))
        elapsed = time.time() - t_start
        logger.info(f"Batch complete: {len(addresses) - failed}/{len(addresses)} succeeded in {elapsed:.1f}s")
        return {addr: results[addr] for addr in addresses}
