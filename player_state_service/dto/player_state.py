from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from player_state_service.settings import EQUIPMENT_SLOT_COUNT

# item ids and gold are unsigned 32-bit values on the game client
UInt32 = Annotated[NonNegativeInt, Field(le=2**32 - 1)]


class Location(BaseModel):
    """Where the player stands. Any coordinate is accepted."""

    model_config = ConfigDict(strict=True)

    x: int
    y: int
    zone: str


class Equipment(BaseModel):
    """Item identifiers held in the player's equipment slots."""

    model_config = ConfigDict(strict=True)

    items: Annotated[
        list[UInt32],
        Field(min_length=EQUIPMENT_SLOT_COUNT, max_length=EQUIPMENT_SLOT_COUNT),
    ]


class PlayerState(BaseModel):
    """Declared, trusted player state used by the secure pipeline.

    Only `equipment` and `location` exist here; the binder rejects any other
    key before this model is handed to the application.
    """

    model_config = ConfigDict(strict=True, extra="forbid")

    equipment: Equipment
    location: Location


class VulnerablePlayerState(BaseModel):
    """Player state schema used by the vulnerable pipeline.

    The client never sends `isAdmin` or `gold`, yet they are declared here as
    optional fields, so a payload that injects them binds cleanly and the
    handler acts on them.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    equipment: Equipment
    location: Location
    is_admin: bool | None = Field(default=None, alias="isAdmin")
    gold: UInt32 | None = Field(default=None)
