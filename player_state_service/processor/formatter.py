"""Maps the outcome of a pipeline run to an HTTP status and plain-text body.

| outcome                  | status | body                                                      |
|--------------------------|--------|-----------------------------------------------------------|
| DecodeError              | 400    | Invalid Base64 data                                       |
| MalformedPayload         | 400    | JSON Deserialization Error: <parse error>                 |
| SchemaMismatch           | 400    | JSON Deserialization Error: <parse error>                 |
| UnexpectedFields         | 400    | MITIGATED: Payload rejected due to unexpected fields. ... |
| OutOfRangeError          | 422    | MITIGATED: Invalid item level detected. ...               |
| state, PERMISSIVE        | 200    | updated message, plus ALERT lines for isAdmin / gold      |
| state, STRICT            | 200    | securely updated message                                  |
"""

from __future__ import annotations

from pydantic import BaseModel

from player_state_service.dto.player_state import PlayerState, VulnerablePlayerState
from player_state_service.dto.state_response import StateResponse
from player_state_service.processor.binder import Mode
from player_state_service.processor.errors import (
    BindError,
    DecodeError,
    OutOfRangeError,
    PipelineError,
    UnexpectedFields,
)
from player_state_service.settings import settings

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_UNPROCESSABLE_ENTITY = 422

ADMIN_ALERT = "\nALERT: Attacker successfully escalated privileges to ADMIN!"
GOLD_ALERT = "\nALERT: Attacker granted themselves {gold} gold!"


def sword_level(state: PlayerState | VulnerablePlayerState) -> int:
    return state.equipment.items[settings.SWORD_SLOT]


def escalation_alerts(state: VulnerablePlayerState) -> list[str]:
    """Alerts for gadget fields the vulnerable handler acted on."""
    alerts = []
    if state.is_admin is True:
        alerts.append(ADMIN_ALERT)
    if state.gold is not None:
        alerts.append(GOLD_ALERT.format(gold=state.gold))
    return alerts


def format_error(error: PipelineError) -> StateResponse:
    if isinstance(error, DecodeError):
        return StateResponse(status_code=HTTP_BAD_REQUEST, body="Invalid Base64 data")

    if isinstance(error, UnexpectedFields):
        # only field names are echoed back, never their values
        return StateResponse(
            status_code=HTTP_BAD_REQUEST,
            body=f"MITIGATED: Payload rejected due to unexpected fields. Error: {error}",
        )

    if isinstance(error, BindError):
        return StateResponse(status_code=HTTP_BAD_REQUEST, body=f"JSON Deserialization Error: {error}")

    if isinstance(error, OutOfRangeError):
        return StateResponse(
            status_code=HTTP_UNPROCESSABLE_ENTITY,
            body=f"MITIGATED: Invalid item level detected. {error.name.capitalize()} cannot exceed {error.bound}.",
        )

    raise TypeError(f"no response mapping for {type(error).__name__}")


def format_success(user_id: int, mode: Mode, state: BaseModel) -> StateResponse:
    if mode is Mode.STRICT:
        body = f"Player state for user {user_id} securely updated. Sword level is now: {sword_level(state)}."
        return StateResponse(status_code=HTTP_OK, body=body)

    body = f"Player state for user {user_id} updated. Sword level is now: {sword_level(state)}."
    if isinstance(state, VulnerablePlayerState):
        body += "".join(escalation_alerts(state))
    return StateResponse(status_code=HTTP_OK, body=body)


def format_response(user_id: int, mode: Mode, outcome: BaseModel | PipelineError) -> StateResponse:
    """ Builds the response for one pipeline run.

    Args:
        user_id (int): user the state was submitted for, only interpolated.
        mode (Mode): binder mode the pipeline ran in.
        outcome (BaseModel | PipelineError): the bound state or the error that stopped the pipeline.

    Returns:
        StateResponse: status code and plain-text body.
    """
    if isinstance(outcome, PipelineError):
        return format_error(outcome)
    return format_success(user_id, Mode(mode), outcome)
