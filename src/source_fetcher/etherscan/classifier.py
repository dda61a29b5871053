"""Normalize Etherscan getsourcecode records into CanonicalSource.

A record arrives in one of five shapes, checked in this order:

1. unverified address (empty source, "not verified" ABI) -> None
2. Vyper contract -> language tag only, nothing else extracted
3. plain Solidity text (not JSON) -> single file named after the contract
4. full solc standard-JSON input (``language: Solidity``) -> its sources and settings
5. JSON map of path -> {content} -> multiple files

Vyper must be checked before any JSON parsing, since Vyper source would
otherwise land in the single-file case tagged as Solidity.
"""

import json
import logging
import re
from typing import Any, Dict, Optional

from ..filenames import make_filename, normalize_path
from ..models import DEFAULT_EVM_VERSION, LIBRARIES_KEY, CanonicalSource, CompilerOptions, RawRecord

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"\s*([0-9]+)")


def classify(record: RawRecord) -> Optional[CanonicalSource]:
    """
    Convert one raw record into the canonical source structure.

    Args:
        record: Validated Etherscan record

    Returns:
        CanonicalSource, or None if the contract is not verified
    """
    if record.is_unverified:
        logger.debug("Contract source code not verified")
        return None

    if record.compiler_version.startswith("vyper"):
        logger.debug(f"Vyper contract ({record.compiler_version}), no sources extracted")
        return CanonicalSource(
            sources={},
            options=CompilerOptions(language="Vyper", version="", settings={}),
        )

    source_json = parse_source_json(record.source_code)
    if source_json is None:
        return process_single_result(record)
    if is_full_json(source_json):
        return process_json_result(record, source_json)
    return process_multi_result(record, source_json)


def parse_source_json(source_code: str) -> Optional[Dict[str, Any]]:
    """
    Parse SourceCode as a JSON object.

    Etherscan stores standard-JSON inputs wrapped in an extra pair of braces
    (``{{ ... }}``); that wrapper is removed first.

    Returns:
        The parsed object, or None if the text is not a JSON object
    """
    text = source_code.strip()
    if text.startswith("{{") and text.endswith("}}"):
        text = text[1:-1]
    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError):
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed


def is_full_json(source_json: Dict[str, Any]) -> bool:
    return source_json.get("language") == "Solidity"


def process_single_result(record: RawRecord) -> CanonicalSource:
    filename = make_filename(record.contract_name)
    return CanonicalSource(
        sources={filename: record.source_code},
        options=CompilerOptions(
            language="Solidity",
            version=record.compiler_version,
            settings=extract_settings(record),
        ),
    )


def process_multi_result(record: RawRecord, sources: Dict[str, Any]) -> CanonicalSource:
    return CanonicalSource(
        sources=process_sources(sources),
        options=CompilerOptions(
            language="Solidity",
            version=record.compiler_version,
            settings=extract_settings(record),
        ),
    )


def process_json_result(record: RawRecord, json_input: Dict[str, Any]) -> CanonicalSource:
    sources = json_input.get("sources")
    settings = json_input.get("settings")
    return CanonicalSource(
        sources=process_sources(sources if isinstance(sources, dict) else {}),
        options=CompilerOptions(
            language="Solidity",
            version=record.compiler_version,
            settings=remove_libraries(settings if isinstance(settings, dict) else {}),
        ),
    )


def process_sources(sources: Dict[str, Any]) -> Dict[str, str]:
    """Map each source path to its normalized filename and text."""
    processed = {}
    for path, entry in sources.items():
        if isinstance(entry, dict):
            content = entry.get("content", "")
        elif isinstance(entry, str):
            content = entry
        else:
            content = ""
        processed[normalize_path(path)] = content if isinstance(content, str) else ""
    return processed


def extract_settings(record: RawRecord) -> Dict[str, Any]:
    """
    Build solc settings from the record's flat fields.

    The Library field is deliberately ignored: unlinked bytecode is what the
    recompilation side wants. evmVersion is left out when Etherscan reports
    "Default".
    """
    settings: Dict[str, Any] = {
        "optimizer": {
            "enabled": record.optimization_used == "1",
            "runs": parse_runs(record.runs),
        }
    }
    if record.evm_version != DEFAULT_EVM_VERSION:
        settings["evmVersion"] = record.evm_version
    return settings


def remove_libraries(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of settings without library linkage."""
    return {key: value for key, value in settings.items() if key != LIBRARIES_KEY}


def parse_runs(value: str) -> int:
    """
    Read the optimizer run count from its string form.

    Only leading ASCII digits count ("200" -> 200, "200 runs" -> 200);
    a value without any ("", "N/A") reads as 0.
    """
    match = _LEADING_DIGITS.match(value)
    return int(match.group(1)) if match else 0
