"""
Utilities Package

Contains the clock abstraction, decorators, and the game logger.
"""

from .clock import Clock, ManualClock, RealClock
from .decorators import require_game_service, websocket_game_service_required
from .game_logger import game_logger

__all__ = ['Clock', 'ManualClock', 'RealClock', 'require_game_service',
           'websocket_game_service_required', 'game_logger']
