"""Exception types raised by source fetchers."""


class FetchError(Exception):
    """Base class for every failure surfaced by a fetcher."""


class NetworkUnsupportedError(FetchError):
    """The fetcher was built for a network its provider does not serve."""

    def __init__(self, network_id):
        self.network_id = network_id
        super().__init__(f"Network {network_id} is not supported by this fetcher")


class TransportError(FetchError):
    """The HTTP layer failed (connection, timeout, bad status or framing)."""


class ProviderError(FetchError):
    """The provider answered with a failure envelope.

    The message is the provider's own text, passed through unchanged.
    """
