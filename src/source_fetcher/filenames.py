"""Turn provider-supplied source paths into flat, filesystem-safe names.

Every character outside ``[A-Za-z0-9_.~@+-]`` is percent-encoded, ``%``
included, so the mapping is injective: two different paths can never end up
under the same name.  ``.`` and ``..`` are escaped too, and the empty path maps
to a lone ``%``, which percent-encoding never produces on its own.
"""

from urllib.parse import quote

SOLIDITY_EXTENSION = ".sol"
DEFAULT_CONTRACT_NAME = "Contract"

_EMPTY_PATH = "%"


def normalize_path(path: str) -> str:
    """Encode a source path (e.g. ``@openzeppelin/contracts/ERC20.sol``) as one flat filename."""
    if path == "":
        return _EMPTY_PATH
    if path in (".", ".."):
        return path.replace(".", "%2E")
    return quote(path, safe="@+", errors="surrogatepass")


def make_filename(name: str, extension: str = SOLIDITY_EXTENSION) -> str:
    """
    Build the filename used for a single-file contract.

    Args:
        name: Contract name reported by the provider (may be empty)
        extension: Extension appended when the name does not already carry it

    Returns:
        Normalized filename
    """
    if not name:
        return DEFAULT_CONTRACT_NAME + extension
    filename = normalize_path(name)
    if filename.endswith(extension):
        return filename
    return filename + extension
