from pydantic import BaseModel, ConfigDict, Field


class StateResponse(BaseModel):
    """Outcome of one pipeline run, rendered as a plain-text HTTP response."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., ge=100, le=599, description="HTTP status code.")
    body: str = Field(..., description="Plain-text response body.")
