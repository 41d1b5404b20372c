from typing import Dict, List, Tuple

from ..logger import logger
from .board import Board, Direction
from .objects import GameObject

_log = logger.bind(component="movement")


def slide(board: Board, game_object: GameObject, dx: int, dy: int) -> bool:
    """Slide game_object in direction (dx, dy) until something stops it.

    Any object sitting in the first cell along the way is slid first, with the
    same direction, before this object's own travel is worked out. That push
    may or may not clear the way; the travel below simply reads the board as
    it is afterwards.

    Travel rules, applied cell by cell starting from the first cell:
      * off the board, occupied, or solid: stop in the previous cell
      * slippery: keep going
      * anything else: stop on this cell

    Returns:
        bool: True if the object ended up somewhere else
    """
    if dx == 0 and dy == 0:
        return False

    start_x, start_y = game_object.x, game_object.y
    x, y = start_x + dx, start_y + dy

    if not board.is_on_board(x, y):
        return False

    blocker = board.object_at(x, y)
    if blocker is not None and blocker is not game_object:
        slide(board, blocker, dx, dy)

    while True:
        if not board.is_on_board(x, y) or board.object_at(x, y) is not None:
            break
        cell_type = board.cell_at(x, y)
        if cell_type.solid:
            break
        x, y = x + dx, y + dy
        if not cell_type.slippery:
            break

    moved = board.move_object(game_object, x - dx, y - dy)
    _log.debug(
        f"{game_object.object_id} slid ({dx}, {dy}) from ({start_x}, {start_y}) "
        f"to {game_object.position}"
    )
    return moved


class SlideResolver:
    """Applies slides to the objects of one board."""

    def __init__(self, board: Board):
        self.board = board

    def slide(self, game_object: GameObject, direction: Direction) -> bool:
        return slide(self.board, game_object, direction.dx, direction.dy)

    def slide_all(
        self, game_objects: List[GameObject], dx: int, dy: int
    ) -> Dict[str, Tuple[Tuple[int, int], Tuple[int, int]]]:
        """Slide each object in turn and report the ones that moved.

        Returns:
            Mapping of object id to (start, end) position for every object that
            changed position, including objects that were pushed.
        """
        before = {obj.object_id: obj.position for obj in self.board.iter_objects()}

        for game_object in game_objects:
            slide(self.board, game_object, dx, dy)

        return {
            obj.object_id: (before[obj.object_id], obj.position)
            for obj in self.board.iter_objects()
            if obj.position != before[obj.object_id]
        }
