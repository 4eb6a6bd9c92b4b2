from pydantic import BaseModel, ConfigDict, Field


class GameStateRequest(BaseModel):
    """JSON payloads sent to /vulnerable/state and /secure/state."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    player_state: str = Field(..., alias="playerState", description="Base64-encoded JSON player state.")
