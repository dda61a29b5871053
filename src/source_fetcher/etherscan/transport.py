"""HTTP transport and bounded retry for getsourcecode requests."""

import logging

import requests
from pydantic import ValidationError

from ..errors import FetchError, ProviderError, TransportError
from ..models import EtherscanResponse
from .constants import ALLOWED_ATTEMPTS, api_url

logger = logging.getLogger(__name__)


class EtherscanFetcherTransportMixin:
    def _get_successful_response(self, address: str) -> EtherscanResponse:
        """
        Fetch a successful response, retrying once on failure.

        Every attempt goes through the dispatch gate. If all attempts fail,
        the last error is raised as is.

        Args:
            address: Contract address

        Returns:
            Successful response envelope
        """
        last_error = None
        for attempt in range(ALLOWED_ATTEMPTS):
            self.gate.wait()
            try:
                return self._make_request(address)
            except FetchError as e:
                last_error = e
                if attempt + 1 < ALLOWED_ATTEMPTS:
                    logger.warning(f"Attempt {attempt + 1} for {address} failed, retrying... ({e})")
                else:
                    logger.error(f"Failed to fetch {address} after {ALLOWED_ATTEMPTS} attempts: {e}")
        raise last_error

    def _make_request(self, address: str) -> EtherscanResponse:
        """
        Issue one getsourcecode request.

        Raises:
            TransportError: Connection failure, bad HTTP status or malformed body
            ProviderError: Etherscan reported status "0"
        """
        url = api_url(self.config.suffix)
        params = {
            'module': 'contract',
            'action': 'getsourcecode',
            'address': address,
            'apikey': self.config.api_key,
        }
        logger.debug(f"GET {url} for {address}")

        try:
            response = requests.get(url, params=params, timeout=self.config.request_timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise TransportError(str(e)) from e

        try:
            envelope = EtherscanResponse.model_validate(data)
        except ValidationError as e:
            raise TransportError(f"Malformed Etherscan response: {e}") from e

        if not envelope.ok:
            # result holds the error text on failure
            raise ProviderError(envelope.result if isinstance(envelope.result, str) else envelope.message)
        if isinstance(envelope.result, str):
            raise TransportError(f"Malformed Etherscan response: result is not a list ({envelope.result})")
        return envelope
