import pytest

from source_fetcher.models import RawRecord


def make_record(**fields) -> RawRecord:
    """Build a RawRecord from Etherscan-style field names with sensible defaults."""
    data = {
        "SourceCode": "",
        "ABI": "[]",
        "ContractName": "C",
        "CompilerVersion": "v0.8.0+commit.c7dfd78e",
        "OptimizationUsed": "0",
        "Runs": "200",
        "ConstructorArguments": "",
        "EVMVersion": "Default",
        "Library": "",
        "LicenseType": "MIT",
        "Proxy": "0",
        "Implementation": "",
        "SwarmSource": "",
    }
    data.update(fields)
    return RawRecord.model_validate(data)


@pytest.fixture
def record_factory():
    return make_record


class FakeClock:
    """Monotonic clock whose sleep advances time instantly."""

    def __init__(self):
        self.now = 100.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()
