"""Pydantic models for beacon blocks and scanned block records."""

from pydantic import BaseModel, ConfigDict, Field


class BlockRecord(BaseModel):
    """One row of the block record log."""

    slot: int
    proposer_index: int
    graffiti: str


class BeaconBlockBody(BaseModel):
    """Block body; only the graffiti is read."""

    graffiti: str = Field(..., description="Base64 of the 32-byte graffiti field")

    model_config = ConfigDict(extra="ignore")


class BeaconBlock(BaseModel):
    """Block header fields from the Prysm v1alpha1 API."""

    slot: int = Field(..., description="Slot, sent as a decimal string")
    proposer_index: int = Field(..., alias="proposerIndex")
    body: BeaconBlockBody

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SignedBeaconBlock(BaseModel):
    """Signed block wrapper."""

    block: BeaconBlock

    model_config = ConfigDict(extra="ignore")


class BlockContainer(BaseModel):
    """One block at the requested slot."""

    block: SignedBeaconBlock
    block_root: str | None = Field(default=None, alias="blockRoot")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class BeaconBlocksResponse(BaseModel):
    """Response of GET /eth/v1alpha1/beacon/blocks?slot=N."""

    block_containers: list[BlockContainer] = Field(..., alias="blockContainers")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


__all__ = [
    "BeaconBlock",
    "BeaconBlockBody",
    "BeaconBlocksResponse",
    "BlockContainer",
    "BlockRecord",
    "SignedBeaconBlock",
]
