"""Capability contract shared by every source provider."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import CanonicalSource


class Fetcher(ABC):
    """
    A provider of verified contract sources for one network.

    Implementations are built once per network with ``for_network_id`` and then
    reused for every address on that network.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Static identifier of the provider."""

    @classmethod
    @abstractmethod
    def for_network_id(cls, network_id: int, **kwargs) -> "Fetcher":
        """Build a fetcher for the given network."""

    @abstractmethod
    def is_network_valid(self) -> bool:
        """Whether the provider serves the network this fetcher was built for."""

    @abstractmethod
    def fetch_sources_for_address(self, address: str) -> Optional[CanonicalSource]:
        """
        Fetch and normalize the verified sources of one contract.

        Returns:
            The canonical source structure, or None when nothing is verified

        Raises:
            FetchError: When the provider could not be reached or refused the request
        """
