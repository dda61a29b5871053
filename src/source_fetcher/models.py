"""Pydantic models for raw Etherscan records and the canonical source structure."""

from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

Language = Literal["Solidity", "Vyper"]

NOT_VERIFIED_ABI = "Contract source code not verified"
DEFAULT_EVM_VERSION = "Default"
LIBRARIES_KEY = "libraries"


class RawRecord(BaseModel):
    """
    One entry of a ``getsourcecode`` result.

    Etherscan returns every field as a string, including the optimizer flag
    ("0"/"1") and the run count. SourceCode may hold plain Solidity, a JSON
    map of sources, or a full compiler input.
    """
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    source_code: str = Field("", alias="SourceCode")
    abi: str = Field("", alias="ABI")
    contract_name: str = Field("", alias="ContractName")
    compiler_version: str = Field("", alias="CompilerVersion")
    optimization_used: str = Field("", alias="OptimizationUsed")
    runs: str = Field("0", alias="Runs")
    evm_version: str = Field(DEFAULT_EVM_VERSION, alias="EVMVersion")
    # Never forwarded
    constructor_arguments: str = Field("", alias="ConstructorArguments")
    library: str = Field("", alias="Library")
    license_type: str = Field("", alias="LicenseType")
    proxy: str = Field("", alias="Proxy")
    implementation: str = Field("", alias="Implementation")
    swarm_source: str = Field("", alias="SwarmSource")

    @property
    def is_unverified(self) -> bool:
        return self.source_code == "" and self.abi == NOT_VERIFIED_ABI


class EtherscanResponse(BaseModel):
    """Response envelope: result is a record list on success, an error string on failure."""
    model_config = ConfigDict(extra="ignore")

    status: str
    message: str = ""
    result: Union[List[RawRecord], str]

    @property
    def ok(self) -> bool:
        return self.status == "1"


class CompilerOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: Language
    version: str
    settings: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _no_library_linkage(self):
        if LIBRARIES_KEY in self.settings:
            raise ValueError("Compiler settings must not carry library linkage")
        return self


class CanonicalSource(BaseModel):
    """
    Provider-independent compilation input.

    ``sources`` maps normalized filenames to source text; ``options`` holds
    the language, compiler version and solc settings (never libraries, so
    recompiling always yields unlinked bytecode).
    """
    model_config = ConfigDict(frozen=True)

    sources: Dict[str, str] = Field(default_factory=dict)
    options: CompilerOptions
