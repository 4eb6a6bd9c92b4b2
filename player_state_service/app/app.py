import logging

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from player_state_service.api import api
from player_state_service.processor.processor import StateProcessor
from player_state_service.settings import settings


def create_app() -> FastAPI:
    """
        :description: Creates FastAPI application with the state and health routers
                      and attaches the shared, stateless state processor
        :return: FastAPI application instance
    """

    app = FastAPI(title="Player State Service",
                  description="Player state API with permissive and strict schema binding",
                  version=settings.PLAYER_STATE_SERVICE_VERSION,
                  default_response_class=ORJSONResponse,
                  debug=settings.DEBUG_MODE)
    app.include_router(api)

    # holds configuration only, safe to share between concurrent requests
    app.state.processor = StateProcessor()

    logging.info("player state service created, max sword level: %s", settings.MAX_SWORD_LEVEL)

    return app
