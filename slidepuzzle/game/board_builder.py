"""
BoardBuilder for generating ice slide puzzle boards.

Terrain starts as ICE everywhere, then walls, extra empty cells and a single
goal are drawn from a shuffled list of cells. The player and blocks are placed
from a second, independent shuffle, so an object may start on a WALL or GOAL
cell; only object-on-object collisions are ruled out.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..logger import logger
from .board import Board, CellType
from .errors import InvalidConfigurationError
from .objects import ObjectType


@dataclass
class BoardConfig:
    """Configuration for board generation."""

    board_w: int = 10
    board_h: int = 10
    num_walls: int = 10
    num_blocks: int = 5
    num_empties: int = 6
    # Place objects only on cells the terrain pass left as ICE
    avoid_terrain_overlap: bool = False

    def validate(self) -> None:
        """Raise InvalidConfigurationError if the counts cannot fit the board."""
        if self.board_w <= 0 or self.board_h <= 0:
            raise InvalidConfigurationError(
                f"Board dimensions must be positive, got {self.board_w}x{self.board_h}"
            )

        for name in ("num_walls", "num_blocks", "num_empties"):
            if getattr(self, name) < 0:
                raise InvalidConfigurationError(f"{name} must not be negative")

        cells = self.board_w * self.board_h
        terrain_cells = self.num_walls + self.num_empties + 1  # +1 goal
        object_cells = self.num_blocks + 1  # +1 player

        if terrain_cells > cells:
            raise InvalidConfigurationError(
                f"{self.num_walls} walls, {self.num_empties} empties and a goal "
                f"need {terrain_cells} cells, board has {cells}"
            )
        if object_cells > cells:
            raise InvalidConfigurationError(
                f"{self.num_blocks} blocks and a player need {object_cells} cells, "
                f"board has {cells}"
            )
        if self.avoid_terrain_overlap and terrain_cells + object_cells > cells:
            raise InvalidConfigurationError(
                f"Non-overlapping placement needs {terrain_cells + object_cells} "
                f"cells, board has {cells}"
            )


class BoardBuilder:
    """Generates ice slide puzzle boards."""

    def __init__(self, config: BoardConfig, seed: Optional[int] = None):
        """Initialize board builder with configuration.

        Args:
            config: Board generation configuration
            seed: Random seed for deterministic generation
        """
        self.config = config
        self.seed = seed
        self.rng = random.Random(seed)
        self.logger = logger.bind(component="board_builder")

    def generate_board(self) -> Board:
        """Generate a complete puzzle board.

        Returns:
            Board: Generated board with terrain, one player and all blocks placed

        Raises:
            InvalidConfigurationError: If the requested counts do not fit
        """
        self.config.validate()

        board = Board(self.config.board_w, self.config.board_h, fill=CellType.ICE)

        cells = self.shuffled_cells(board)
        cells = self._place_terrain(board, cells, CellType.WALL, self.config.num_walls)
        cells = self._place_terrain(board, cells, CellType.EMPTY, self.config.num_empties)
        cells = self._place_terrain(board, cells, CellType.GOAL, 1)

        if not self.config.avoid_terrain_overlap:
            cells = self.shuffled_cells(board)

        cells = self._place_objects(board, cells, ObjectType.PLAYER, 1)
        self._place_objects(board, cells, ObjectType.BLOCK, self.config.num_blocks)

        self.logger.debug(
            f"Generated {board.width}x{board.height} board (seed={self.seed}): "
            f"{self.config.num_walls} walls, {self.config.num_empties} empties, "
            f"{self.config.num_blocks} blocks, goal at {board.goal_position()}"
        )
        return board

    def shuffled_cells(self, board: Board) -> List[Tuple[int, int]]:
        """Return every cell of the board in a uniformly random order (Fisher-Yates)."""
        cells = [(x, y) for y in range(board.height) for x in range(board.width)]
        for i in range(len(cells) - 1, 0, -1):
            j = self.rng.randint(0, i)
            cells[i], cells[j] = cells[j], cells[i]
        return cells

    def _place_terrain(
        self,
        board: Board,
        cells: List[Tuple[int, int]],
        cell_type: CellType,
        count: int,
    ) -> List[Tuple[int, int]]:
        """Assign cell_type to the next count cells, returning the unconsumed rest."""
        for x, y in cells[:count]:
            board.set_cell_type(x, y, cell_type)
        return cells[count:]

    def _place_objects(
        self,
        board: Board,
        cells: List[Tuple[int, int]],
        object_type: ObjectType,
        count: int,
    ) -> List[Tuple[int, int]]:
        """Place count objects on the next free cells, returning the unconsumed rest.

        Terrain is not inspected here, only whether another object is present.
        """
        remaining = list(cells)
        placed = 0
        while placed < count and remaining:
            x, y = remaining.pop(0)
            if board.object_at(x, y) is not None:
                continue
            board.add_object(object_type, x, y)
            placed += 1
        return remaining


def create_puzzle(
    width: int,
    height: int,
    num_walls: int,
    num_blocks: int,
    num_empties: int,
    seed: Optional[int] = None,
) -> Board:
    """Generate a fresh puzzle board.

    Raises:
        InvalidConfigurationError: If the counts do not fit a width x height board
    """
    config = BoardConfig(
        board_w=width,
        board_h=height,
        num_walls=num_walls,
        num_blocks=num_blocks,
        num_empties=num_empties,
    )
    return BoardBuilder(config, seed=seed).generate_board()
