"""
Model validation unit tests.
"""
import pytest
from pydantic import ValidationError

from source_fetcher.models import CanonicalSource, CompilerOptions, EtherscanResponse, RawRecord


@pytest.mark.unit
def test_raw_record_defaults_and_extra_fields():
    record = RawRecord.model_validate({"SourceCode": "contract C {}", "SomethingNew": "x"})
    assert record.source_code == "contract C {}"
    assert record.runs == "0"
    assert record.evm_version == "Default"
    assert not hasattr(record, "SomethingNew")


@pytest.mark.unit
def test_raw_record_keeps_runs_as_raw_text():
    assert RawRecord.model_validate({"Runs": "N/A"}).runs == "N/A"
    assert RawRecord.model_validate({"Runs": "\u00b2"}).runs == "\u00b2"


@pytest.mark.unit
def test_raw_record_is_frozen():
    record = RawRecord.model_validate({"SourceCode": "x"})
    with pytest.raises(ValidationError):
        record.source_code = "y"


@pytest.mark.unit
def test_response_envelope_shapes():
    ok = EtherscanResponse.model_validate({"status": "1", "message": "OK", "result": [{"SourceCode": "x"}]})
    assert ok.ok
    assert isinstance(ok.result[0], RawRecord)

    failed = EtherscanResponse.model_validate({"status": "0", "message": "NOTOK", "result": "Invalid API Key"})
    assert not failed.ok
    assert failed.result == "Invalid API Key"


@pytest.mark.unit
def test_canonical_source_rejects_library_linkage():
    with pytest.raises(ValidationError):
        CompilerOptions(language="Solidity", version="v0.8.0", settings={"libraries": {}})


@pytest.mark.unit
def test_canonical_source_rejects_unknown_language():
    with pytest.raises(ValidationError):
        CompilerOptions(language="Yul", version="", settings={})


@pytest.mark.unit
def test_canonical_source_serializes_to_expected_layout():
    source = CanonicalSource(
        sources={"C.sol": "contract C {}"},
        options=CompilerOptions(language="Solidity", version="v0.8.0", settings={"evmVersion": "london"}),
    )
    assert source.model_dump() == {
        "sources": {"C.sol": "contract C {}"},
        "options": {"language": "Solidity", "version": "v0.8.0", "settings": {"evmVersion": "london"}},
    }
