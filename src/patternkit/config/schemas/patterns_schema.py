"""Pattern component configuration schemas."""
from pydantic import BaseModel, Field, field_validator


class ObserverConfig(BaseModel):
    """Observer registry configuration."""

    allow_duplicates: bool = Field(
        True, description="Whether the same observer may be registered more than once"
    )


class StrategyConfig(BaseModel):
    """Strategy selector configuration."""

    default_algorithm: str = Field("zip", description="Compression algorithm used when none is given")

    @field_validator("default_algorithm")
    @classmethod
    def validate_default_algorithm(cls, v: str) -> str:
        """Validate default algorithm name."""
        name = v.strip().lower()
        if not name:
            raise ValueError("Default algorithm must not be empty")
        return name
