import threading
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..logger import logger
from .board import Board, Direction
from .board_builder import BoardBuilder, BoardConfig
from .movement import SlideResolver
from .objects import ObjectType


class GameEvent:
    def __init__(self, event_type: str, data: Dict[str, Any], move: int):
        self.event_type = event_type
        self.data = data
        self.move = move
        self.timestamp = time.time()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type,
            "data": self.data,
            "move": self.move,
            "timestamp": self.timestamp,
        }


class GameEngine:
    """Owns the board for one play session.

    Renderers and input handlers talk to the engine: input calls move_player,
    renderers read get_board_state / get_object_states or register a move
    callback. One lock guards every mutation, so a reader on another thread
    never sees a board halfway through a chain of pushes.
    """

    def __init__(self, board: Board):
        self.board = board
        self.resolver = SlideResolver(board)
        self.move_count = 0
        self.events: List[GameEvent] = []
        self.move_callbacks: List[Callable[["GameEngine"], None]] = []
        self.logger = logger.bind(component="engine")
        self._lock = threading.Lock()

        # Store initial state for reset functionality
        self.initial_board = board.copy()

    @classmethod
    def from_config(cls, config: BoardConfig, seed: Optional[int] = None) -> "GameEngine":
        return cls(BoardBuilder(config, seed=seed).generate_board())

    def add_move_callback(self, callback: Callable[["GameEngine"], None]) -> None:
        self.move_callbacks.append(callback)

    def remove_move_callback(self, callback: Callable[["GameEngine"], None]) -> None:
        if callback in self.move_callbacks:
            self.move_callbacks.remove(callback)

    def _notify_callbacks(self) -> None:
        # Called outside the lock so callbacks may read state
        for callback in self.move_callbacks:
            callback(self)

    def _emit_event(self, event_type: str, data: Dict[str, Any]) -> None:
        event = GameEvent(event_type, data, self.move_count)
        self.events.append(event)

    def move_player(self, direction: Direction) -> bool:
        """Slide every player in direction.

        Returns:
            bool: True if any object on the board moved
        """
        return self.move_player_by(direction.dx, direction.dy)

    def move_player_by(self, dx: int, dy: int) -> bool:
        with self._lock:
            players = list(self.board.get_objects_by_type(ObjectType.PLAYER))
            movements = self.resolver.slide_all(players, dx, dy)

            if movements:
                self.move_count += 1
                self._emit_event(
                    "player_moved",
                    {
                        "dx": dx,
                        "dy": dy,
                        "movements": {
                            object_id: {"from": start, "to": end}
                            for object_id, (start, end) in movements.items()
                        },
                    },
                )
                self.logger.debug(
                    f"Move {self.move_count} ({dx}, {dy}): {len(movements)} objects moved"
                )
            else:
                self._emit_event("move_blocked", {"dx": dx, "dy": dy})

        self._notify_callbacks()

        return bool(movements)

    def new_puzzle(self, config: BoardConfig, seed: Optional[int] = None) -> Board:
        """Replace the current board with a freshly generated one."""
        board = BoardBuilder(config, seed=seed).generate_board()
        with self._lock:
            self.board = board
            self.resolver = SlideResolver(board)
            self.initial_board = board.copy()
            self.move_count = 0
            self.events.clear()
            self._emit_event(
                "puzzle_created", {"width": board.width, "height": board.height}
            )
        self.logger.info(f"New {board.width}x{board.height} puzzle created")
        self._notify_callbacks()
        return board

    def reset(self) -> None:
        with self._lock:
            self.board = self.initial_board.copy()
            self.resolver = SlideResolver(self.board)
            self.move_count = 0
            self.events.clear()
            self._emit_event("reset", {})
        self._notify_callbacks()

    @property
    def goal_position(self) -> Optional[Tuple[int, int]]:
        with self._lock:
            return self.board.goal_position()

    @property
    def player_positions(self) -> List[Tuple[int, int]]:
        with self._lock:
            return self.board.player_positions()

    def get_board_state(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "width": self.board.width,
                "height": self.board.height,
                "grid": [
                    [self.board.cell_at(x, y).name for x in range(self.board.width)]
                    for y in range(self.board.height)
                ],
            }

    def get_object_states(self) -> Dict[str, Any]:
        with self._lock:
            return {
                game_object.object_id: game_object.to_dict()
                for game_object in self.board.iter_objects()
            }
