"""
This file is used to create a FastAPI application that will be served by a ASGI server
"""
import uvicorn

from player_state_service.app import create_app
from player_state_service.settings import settings

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, reload=False)
