from __future__ import annotations

from dataclasses import dataclass

from player_state_service.dto.player_state import PlayerState
from player_state_service.processor.errors import OutOfRangeError
from player_state_service.settings import settings


@dataclass(frozen=True, slots=True)
class SlotLevelRule:
    """Upper bound on the value held by one equipment slot."""

    name: str
    slot: int
    maximum: int

    @property
    def field(self) -> str:
        return f"equipment.items[{self.slot}]"

    def check(self, state: PlayerState) -> None:
        value = state.equipment.items[self.slot]
        if value > self.maximum:
            raise OutOfRangeError(self.field, value, self.maximum, name=self.name)


def sword_level_rule() -> SlotLevelRule:
    return SlotLevelRule(name="sword level", slot=settings.SWORD_SLOT, maximum=settings.MAX_SWORD_LEVEL)


class StateValidator:
    """Checks value ranges a bound player state's shape can not express.

    Binding proves the document has the declared shape; it says nothing about
    whether a sword level of 25 is legal. Runs after a successful bind and is
    independent of the binder mode.
    """

    def __init__(self, rules: tuple[SlotLevelRule, ...] | None = None) -> None:
        self.rules = rules if rules is not None else (sword_level_rule(),)

    def validate(self, state: PlayerState) -> None:
        """ Raises OutOfRangeError for the first rule the state breaks.

        Args:
            state (PlayerState): a successfully bound player state.

        Raises:
            OutOfRangeError: a slot value exceeds its rule's maximum.
        """
        for rule in self.rules:
            rule.check(state)


def validate(state: PlayerState) -> None:
    StateValidator().validate(state)
