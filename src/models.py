# src/models.py
"""
Input models for the agent entrypoints.
Unknown fields are ignored; missing fields take the documented defaults.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Input(BaseModel):
    model_config = ConfigDict(extra="ignore")


class PricesInput(_Input):
    coins: list[str] = Field(..., min_length=1, description='Array of coin IDs (e.g., ["bitcoin", "ethereum", "solana"])')
    currencies: list[str] = Field(default_factory=lambda: ["usd"], description='Array of fiat currencies (e.g., ["usd", "eur"])')


class GasInput(_Input):
    chains: list[str] = Field(
        default_factory=lambda: ["eth", "base", "poly"],
        description="Array of chain IDs (eth, base, poly, arb, opt, avax, bsc, ftm)",
    )


class TvlInput(_Input):
    limit: int = Field(20, ge=1, description="Number of chains to return (sorted by TVL)")
    includeProtocols: bool = Field(False, description="Include top protocols data")


class AnalysisInput(_Input):
    focus: str = Field("overview", description="overview, defi, trading or gas-optimization")
    chains: list[str] = Field(default_factory=lambda: ["ethereum", "base", "polygon"])
    coins: list[str] = Field(default_factory=lambda: ["bitcoin", "ethereum"])

    @field_validator("focus", "chains", "coins", mode="before")
    @classmethod
    def _blank_means_default(cls, value, info):
        # null and "" fall back to the field default
        if value is None or value == "":
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value
