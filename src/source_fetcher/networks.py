"""Network id lookup and Etherscan endpoint suffix resolution."""

import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

NETWORKS_BY_ID = {
    1: "mainnet",
    3: "ropsten",
    4: "rinkeby",
    5: "goerli",
    42: "kovan",
    56: "binance",
    100: "xdai",
    137: "polygon",
    11155111: "sepolia",
}

# Networks that have their own api-<name>.etherscan.io endpoint
ETHERSCAN_NETWORKS = ("mainnet", "ropsten", "kovan", "rinkeby", "goerli")


def resolve_network(network_id: int) -> Tuple[bool, Optional[str]]:
    """
    Resolve a network id to its Etherscan endpoint suffix.

    Args:
        network_id: Chain / network id

    Returns:
        (is_valid, suffix) where suffix is "" for mainnet, "-<name>" for the
        other supported networks and None when the network is not supported
    """
    network_name = NETWORKS_BY_ID.get(network_id)
    if network_name is None or network_name not in ETHERSCAN_NETWORKS:
        logger.debug(f"Network {network_id} ({network_name or 'unknown'}) not supported by Etherscan")
        return False, None

    suffix = "" if network_name == "mainnet" else f"-{network_name}"
    return True, suffix
