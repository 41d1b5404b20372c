from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .errors import OutOfBoundsError
from .objects import GameObject, ObjectType


class CellType(Enum):
    # (code, solid, slippery, symbol)
    EMPTY = (0, False, False, ".")
    ICE = (1, False, True, "_")
    WALL = (2, True, False, "#")
    GOAL = (3, False, False, "G")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def solid(self) -> bool:
        """Objects can never enter a solid cell."""
        return self.value[1]

    @property
    def slippery(self) -> bool:
        """A sliding object keeps going after entering a slippery cell."""
        return self.value[2]

    @property
    def symbol(self) -> str:
        return self.value[3]

    @classmethod
    def from_code(cls, code: int) -> "CellType":
        return _CELL_TYPES_BY_CODE[int(code)]

    @classmethod
    def from_symbol(cls, symbol: str) -> "CellType":
        return _CELL_TYPES_BY_SYMBOL[symbol]


_CELL_TYPES_BY_CODE = {cell_type.code: cell_type for cell_type in CellType}
_CELL_TYPES_BY_SYMBOL = {cell_type.symbol: cell_type for cell_type in CellType}
_OBJECT_TYPES_BY_SYMBOL = {object_type.symbol: object_type for object_type in ObjectType}


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def from_key(cls, key: str) -> "Direction":
        keys = {
            "U": Direction.UP,
            "D": Direction.DOWN,
            "L": Direction.LEFT,
            "R": Direction.RIGHT,
        }
        return keys[key.upper()]


class Board:
    def __init__(self, width: int, height: int, fill: CellType = CellType.ICE):
        self.width = width
        self.height = height
        self.grid = np.full((height, width), fill.code, dtype=int)
        self.objects: Dict[ObjectType, List[GameObject]] = {
            object_type: [] for object_type in ObjectType
        }
        self._next_id = 0

    def is_on_board(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> CellType:
        if not self.is_on_board(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return CellType.from_code(self.grid[y, x])

    def set_cell_type(self, x: int, y: int, cell_type: CellType) -> None:
        """Assign terrain. Only the generator calls this; play never edits the grid."""
        if not self.is_on_board(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        self.grid[y, x] = cell_type.code

    def add_object(
        self, object_type: ObjectType, x: int, y: int, object_id: Optional[str] = None
    ) -> GameObject:
        if object_id is None:
            object_id = f"{object_type.label}_{self._next_id}"
            self._next_id += 1

        game_object = GameObject(object_type, x, y, object_id)
        self.objects[object_type].append(game_object)
        return game_object

    def object_at(self, x: int, y: int) -> Optional[GameObject]:
        # Callers keep the one-object-per-cell invariant; first match wins.
        for game_object in self.iter_objects():
            if game_object.x == x and game_object.y == y:
                return game_object
        return None

    def move_object(self, game_object: GameObject, x: int, y: int) -> bool:
        """Raw position setter: no bounds or collision checks."""
        if game_object.position == (x, y):
            return False
        game_object.move_to(x, y)
        return True

    def get_objects_by_type(self, object_type: ObjectType) -> List[GameObject]:
        return self.objects[object_type]

    def iter_objects(self) -> Iterator[GameObject]:
        for object_list in self.objects.values():
            yield from object_list

    def find_cells_by_type(self, cell_type: CellType) -> List[Tuple[int, int]]:
        positions = []
        for y in range(self.height):
            for x in range(self.width):
                if self.grid[y, x] == cell_type.code:
                    positions.append((x, y))
        return positions

    def goal_position(self) -> Optional[Tuple[int, int]]:
        goals = self.find_cells_by_type(CellType.GOAL)
        return goals[0] if goals else None

    def player_positions(self) -> List[Tuple[int, int]]:
        return [player.position for player in self.get_objects_by_type(ObjectType.PLAYER)]

    def copy(self) -> "Board":
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        new_board.objects = {
            object_type: [game_object.copy() for game_object in object_list]
            for object_type, object_list in self.objects.items()
        }
        new_board._next_id = self._next_id
        return new_board

    @classmethod
    def from_strings(cls, rows: List[str]) -> "Board":
        """Build a board from text rows.

        Terrain uses the CellType symbols. ``P`` and ``B`` place a player or a
        block on ICE, so ``"P_B#"`` is a player, ice, a block and a wall.
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        board = cls(width, height)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has length {len(row)}, expected {width}")
            for x, symbol in enumerate(row):
                if symbol in _OBJECT_TYPES_BY_SYMBOL:
                    board.add_object(_OBJECT_TYPES_BY_SYMBOL[symbol], x, y)
                else:
                    board.set_cell_type(x, y, CellType.from_symbol(symbol))
        return board

    def __str__(self) -> str:
        result = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                game_object = self.object_at(x, y)
                if game_object is not None:
                    row.append(game_object.object_type.symbol)
                else:
                    row.append(self.cell_at(x, y).symbol)
            result.append("".join(row))
        return "\n".join(result)
