"""Pydantic models for beaconcha.in validator deposits."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.helpers.constants import MIN_DEPOSIT_GWEI


class Deposit(BaseModel):
    """Execution-layer deposit backing a validator."""

    amount: int = Field(..., description="Deposit amount in gwei")
    from_address: str
    publickey: str
    removed: bool
    valid_signature: bool

    model_config = ConfigDict(extra="ignore")

    @property
    def is_valid(self) -> bool:
        """Full-size, not removed, and correctly signed."""
        return (
            self.amount >= MIN_DEPOSIT_GWEI
            and not self.removed
            and self.valid_signature
        )


class DepositsResponse(BaseModel):
    """Response of GET /api/v1/validator/{indexes}/deposits."""

    status: str
    data: list[Deposit] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("data", mode="before")
    @classmethod
    def _null_data(cls, value: object) -> object:
        # Error responses carry "data": null
        return [] if value is None else value


__all__ = ["Deposit", "DepositsResponse"]
