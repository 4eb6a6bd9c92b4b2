from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse

from player_state_service.dto.info_response import InfoResponse
from player_state_service.utils.utils import get_app_info

health_api = APIRouter(prefix="/api")


@health_api.get("/health", response_class=ORJSONResponse)
def health() -> ORJSONResponse:
    return ORJSONResponse(content={"status": "healthy"})


@health_api.get("/ready", response_class=ORJSONResponse)
def ready(request: Request) -> ORJSONResponse:
    processor = getattr(request.app.state, "processor", None)
    if processor is None:
        return ORJSONResponse(status_code=503, content={"status": "not_ready", "issues": ["processor_not_initialized"]})

    rules = [rule.field for rule in processor.validator.rules]
    return ORJSONResponse(content={"status": "ready", "validation_rules": rules})


@health_api.get("/info", response_model=InfoResponse, response_class=ORJSONResponse)
def info() -> ORJSONResponse:
    return ORJSONResponse(content=get_app_info())
