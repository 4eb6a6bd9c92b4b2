from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import PlainTextResponse

from player_state_service.dto.state_request import GameStateRequest
from player_state_service.processor.binder import Mode
from player_state_service.processor.processor import StateProcessor

state_api = APIRouter()

UserId = Annotated[int, Path(ge=0, le=2**32 - 1, description="Player id, only echoed in messages and logs.")]


def get_processor(request: Request) -> StateProcessor:
    processor = getattr(request.app.state, "processor", None)
    if processor is None:
        processor = StateProcessor()
        request.app.state.processor = processor
    return processor


def _respond(processor: StateProcessor, user_id: int, payload: GameStateRequest, mode: Mode) -> PlainTextResponse:
    response = processor.process(user_id, payload.player_state, mode)
    return PlainTextResponse(content=response.body, status_code=response.status_code)


@state_api.post("/vulnerable/state/{user_id}", response_class=PlainTextResponse)
def vulnerable_state_update(user_id: UserId, payload: GameStateRequest,
                            processor: StateProcessor = Depends(get_processor)) -> PlainTextResponse:
    return _respond(processor, user_id, payload, Mode.PERMISSIVE)


@state_api.post("/secure/state/{user_id}", response_class=PlainTextResponse)
def secure_state_update(user_id: UserId, payload: GameStateRequest,
                        processor: StateProcessor = Depends(get_processor)) -> PlainTextResponse:
    return _respond(processor, user_id, payload, Mode.STRICT)
