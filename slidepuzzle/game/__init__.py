from .board import Board, CellType, Direction
from .board_builder import BoardBuilder, BoardConfig, create_puzzle
from .engine import GameEngine, GameEvent
from .errors import InvalidConfigurationError, OutOfBoundsError, PuzzleError
from .movement import SlideResolver, slide
from .objects import GameObject, ObjectType

__all__ = [
    "Board",
    "CellType",
    "Direction",
    "BoardBuilder",
    "BoardConfig",
    "create_puzzle",
    "GameEngine",
    "GameEvent",
    "InvalidConfigurationError",
    "OutOfBoundsError",
    "PuzzleError",
    "SlideResolver",
    "slide",
    "GameObject",
    "ObjectType",
]
