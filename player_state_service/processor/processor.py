from __future__ import annotations

from pydantic import BaseModel

from player_state_service.dto.state_response import StateResponse
from player_state_service.processor.binder import Mode, bind
from player_state_service.processor.decoder import decode
from player_state_service.processor.errors import (
    BindError,
    DecodeError,
    PipelineError,
    StateValidationError,
    UnexpectedFields,
)
from player_state_service.processor.formatter import escalation_alerts, format_response
from player_state_service.processor.validator import StateValidator
from player_state_service.settings import settings
from player_state_service.utils.utils import setup_logging


class StateProcessor:
    """Runs the decode -> bind -> validate -> format pipeline for one request.

    The processor only holds configuration (logger, validator rules); every
    call works on its own values, so one instance serves concurrent requests.
    """

    def __init__(self, validator: StateValidator | None = None):
        self.log = setup_logging(component_name="processor", log_level=settings.LOG_LEVEL)
        self.log.debug("log level set to : " + str(settings.LOG_LEVEL))
        self.validator = validator if validator is not None else StateValidator()

    def _run_vulnerable(self, user_id: int, encoded: str) -> BaseModel:
        # no range validation on this path, the vulnerable handler never had any
        state = bind(decode(encoded), Mode.PERMISSIVE)
        self.log.info("[VULNERABLE] Received state for user %s: %r", user_id, state)

        for alert in escalation_alerts(state):  # type: ignore[arg-type]
            self.log.warning(alert.strip())

        return state

    def _run_secure(self, user_id: int, encoded: str) -> BaseModel:
        state = bind(decode(encoded), Mode.STRICT)
        self.validator.validate(state)  # type: ignore[arg-type]
        self.log.info("[SECURE] Received and validated state for user %s: %r", user_id, state)
        return state

    def process(self, user_id: int, encoded: str, mode: Mode) -> StateResponse:
        """ Processes one base64-encoded player state submission.

        Args:
            user_id (int): user the state belongs to, used for messages and logs only.
            encoded (str): base64 text from the `playerState` request field.
            mode (Mode): PERMISSIVE for the vulnerable pipeline, STRICT for the secure one.

        Returns:
            StateResponse: status code and body, pipeline errors never escape.
        """
        mode = Mode(mode)
        outcome: BaseModel | PipelineError

        try:
            if mode is Mode.STRICT:
                outcome = self._run_secure(user_id, encoded)
            else:
                outcome = self._run_vulnerable(user_id, encoded)
        except DecodeError as exc:
            self.log.info("rejected state for user %s: %s", user_id, exc)
            outcome = exc
        except UnexpectedFields as exc:
            self.log.warning("MITIGATED: payload for user %s rejected due to unexpected fields: %s", user_id, exc)
            outcome = exc
        except BindError as exc:
            self.log.info("rejected state for user %s (%s mode): %s", user_id, mode.value, exc)
            outcome = exc
        except StateValidationError as exc:
            self.log.warning("MITIGATED: invalid state for user %s: %s", user_id, exc)
            outcome = exc

        return format_response(user_id, mode, outcome)
