import unittest

from player_state_service.dto.player_state import PlayerState, VulnerablePlayerState
from player_state_service.processor.binder import Mode
from player_state_service.processor.errors import (
    DecodeError,
    MalformedPayload,
    OutOfRangeError,
    PipelineError,
    SchemaMismatch,
    UnexpectedFields,
)
from player_state_service.processor.formatter import format_response

from ..tests.utils_helpers import valid_document


class TestFormatResponse(unittest.TestCase):

    def test_decode_error(self):
        response = format_response(7, Mode.STRICT, DecodeError("Invalid Base64 data"))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.body, "Invalid Base64 data")

    def test_malformed_and_mismatch_include_parse_error(self):
        for error in (MalformedPayload("Expecting value: line 1 column 1 (char 0)"),
                      SchemaMismatch("location: Field required")):
            for mode in Mode:
                with self.subTest(error=type(error).__name__, mode=mode):
                    response = format_response(7, mode, error)
                    self.assertEqual(response.status_code, 400)
                    self.assertEqual(response.body, f"JSON Deserialization Error: {error}")

    def test_unexpected_fields(self):
        error = UnexpectedFields(["isAdmin"], expected=["equipment", "location"])
        response = format_response(7, Mode.STRICT, error)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.body,
            "MITIGATED: Payload rejected due to unexpected fields. "
            "Error: unknown field `isAdmin`, expected `equipment` or `location`",
        )

    def test_out_of_range(self):
        error = OutOfRangeError("equipment.items[2]", 25, 20, name="sword level")
        response = format_response(7, Mode.STRICT, error)
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.body, "MITIGATED: Invalid item level detected. Sword level cannot exceed 20.")

    def test_strict_success_echoes_sword_level_only(self):
        state = PlayerState.model_validate(valid_document(items=[0, 0, 17, 0, 0]))
        response = format_response(42, Mode.STRICT, state)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.body, "Player state for user 42 securely updated. Sword level is now: 17.")

    def test_permissive_success_without_gadgets(self):
        state = VulnerablePlayerState.model_validate(valid_document())
        response = format_response(42, Mode.PERMISSIVE, state)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.body, "Player state for user 42 updated. Sword level is now: 3.")

    def test_permissive_success_announces_escalation(self):
        state = VulnerablePlayerState.model_validate({**valid_document(), "isAdmin": True, "gold": 1000})
        response = format_response(42, Mode.PERMISSIVE, state)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.body,
            "Player state for user 42 updated. Sword level is now: 3."
            "\nALERT: Attacker successfully escalated privileges to ADMIN!"
            "\nALERT: Attacker granted themselves 1000 gold!",
        )

    def test_admin_false_is_not_an_escalation(self):
        state = VulnerablePlayerState.model_validate({**valid_document(), "isAdmin": False})
        response = format_response(1, Mode.PERMISSIVE, state)
        self.assertNotIn("ALERT", response.body)

    def test_unmapped_error_raises(self):
        with self.assertRaises(TypeError):
            format_response(1, Mode.STRICT, PipelineError("unknown"))
