"""Engine layer: coin transfers and the game session."""

from geocoin.engine.session import GameSession
from geocoin.engine.transfer import TransferEngine

__all__ = ["GameSession", "TransferEngine"]
