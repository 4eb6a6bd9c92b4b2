from pydantic import BaseModel, Field


class InfoResponse(BaseModel):
    """Response payload for the /api/info endpoint."""

    service_app_name: str = Field(..., description="Service name.")
    service_version: str = Field(..., description="Service version string.")
    binder_modes: list[str] = Field(..., description="Schema binding modes served by the API.")
    max_sword_level: int = Field(..., description="Highest sword level the secure pipeline accepts.")
