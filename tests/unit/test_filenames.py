"""
Filename normalization unit tests.
"""
import pytest

from source_fetcher.filenames import make_filename, normalize_path


@pytest.mark.unit
def test_plain_names_are_unchanged():
    assert normalize_path("a.sol") == "a.sol"
    assert normalize_path("Token_v2-final.sol") == "Token_v2-final.sol"
    assert normalize_path("@openzeppelin") == "@openzeppelin"


@pytest.mark.unit
def test_separators_are_escaped_not_stripped():
    assert normalize_path("contracts/Token.sol") == "contracts%2FToken.sol"
    assert normalize_path("contracts\\Token.sol") == "contracts%5CToken.sol"
    assert "/" not in normalize_path("../../etc/passwd")


@pytest.mark.unit
def test_dot_names_are_escaped():
    assert normalize_path(".") == "%2E"
    assert normalize_path("..") == "%2E%2E"


@pytest.mark.unit
def test_distinct_paths_never_collide():
    paths = [
        "",
        ".",
        "..",
        "%",
        "%2E",
        "%2F",
        "a/b.sol",
        "a_b.sol",
        "a%2Fb.sol",
        "a\\b.sol",
        "a b.sol",
        "a+b.sol",
        "a:b.sol",
        "ä.sol",
        "a.sol",
        "a.sol/",
        "/a.sol",
    ]
    normalized = [normalize_path(path) for path in paths]
    assert len(set(normalized)) == len(paths)


@pytest.mark.unit
def test_make_filename_appends_extension_once():
    assert make_filename("C") == "C.sol"
    assert make_filename("C.sol") == "C.sol"


@pytest.mark.unit
def test_make_filename_defaults_for_empty_name():
    assert make_filename("") == "Contract.sol"


@pytest.mark.unit
def test_lone_surrogates_are_encoded_injectively():
    paths = ["\ud800.sol", "\udfff.sol", "%ED%A0%80.sol", "\U00010000.sol"]
    normalized = [normalize_path(path) for path in paths]
    assert normalized[0] == "%ED%A0%80.sol"
    assert len(set(normalized)) == len(paths)
