from fastapi import APIRouter

from player_state_service.api.health import health_api
from player_state_service.api.state import state_api

api = APIRouter()

api.include_router(health_api)
api.include_router(state_api)
