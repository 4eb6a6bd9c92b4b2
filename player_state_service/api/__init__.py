from player_state_service.api.api import api

__all__ = ["api"]
