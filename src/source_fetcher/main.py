#!/usr/bin/env python3
"""
Command-line entry point: fetch verified sources for contract addresses.

Prints (or writes) a JSON object mapping each address to its canonical source
structure, null when the contract is not verified, or {"error": ...}.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import load_settings
from .errors import FetchError
from .etherscan import EtherscanFetcher

logger = logging.getLogger(__name__)


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Fetch verified contract sources from Etherscan',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (can also be set in .env file):
  ETHERSCAN_API_KEY          Etherscan API key (optional)
  ETHERSCAN_NETWORK_ID       Network id (default: 1)
  ETHERSCAN_REQUEST_TIMEOUT  HTTP timeout in seconds (default: 10)

Priority: Command-line arguments > Environment variables > Defaults
        """
    )
    parser.add_argument('addresses', nargs='+', help='Contract address(es)')
    parser.add_argument(
        '--network-id',
        type=int,
        default=settings.network_id,
        help='Network id (env: ETHERSCAN_NETWORK_ID, default: 1)'
    )
    parser.add_argument(
        '--api-key',
        default=settings.api_key,
        help='Etherscan API key (env: ETHERSCAN_API_KEY)'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=settings.request_timeout,
        help='HTTP timeout in seconds (env: ETHERSCAN_REQUEST_TIMEOUT, default: 10)'
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=4,
        help='Maximum concurrent fetches (default: 4)'
    )
    parser.add_argument(
        '--output',
        type=Path,
        default=None,
        help='Write JSON results to this file instead of stdout'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Enable debug logging (default: False)'
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    fetcher = EtherscanFetcher.for_network_id(
        args.network_id,
        api_key=args.api_key,
        request_timeout=args.timeout,
    )
    if not fetcher.is_network_valid():
        logger.error(f"❌ Network {args.network_id} is not supported by {fetcher.name}")
        return 1

    results = fetcher.fetch_sources_for_addresses(args.addresses, max_workers=args.workers)

    output = {}
    has_errors = False
    for address, result in results.items():
        if isinstance(result, FetchError):
            has_errors = True
            output[address] = {'error': str(result)}
        elif result is None:
            output[address] = None
        else:
            output[address] = result.model_dump()

    text = json.dumps(output, indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text)
        logger.info(f"Saved JSON results to {args.output}")
    else:
        print(text)

    return 1 if has_errors else 0


if __name__ == '__main__':
    sys.exit(main())
