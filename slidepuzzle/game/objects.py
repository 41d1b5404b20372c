from enum import Enum
from typing import Any, Dict, Tuple


class ObjectType(Enum):
    BLOCK = ("block", (139, 90, 43), "B")
    PLAYER = ("player", (220, 40, 40), "P")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def color(self) -> Tuple[int, int, int]:
        """RGB colour used by renderers; ignored by the core."""
        return self.value[1]

    @property
    def symbol(self) -> str:
        return self.value[2]


class GameObject:
    """A token occupying exactly one cell.

    Objects are compared by identity: two blocks on the same cell (which the
    board never allows) would still be distinct objects.
    """

    def __init__(self, object_type: ObjectType, x: int, y: int, object_id: str):
        self.object_type = object_type
        self.x = x
        self.y = y
        self.object_id = object_id

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def copy(self) -> "GameObject":
        return GameObject(self.object_type, self.x, self.y, self.object_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object_id": self.object_id,
            "type": self.object_type.label,
            "x": self.x,
            "y": self.y,
        }

    def __repr__(self) -> str:
        return f"GameObject({self.object_type.name}, {self.x}, {self.y}, {self.object_id!r})"

    def __str__(self) -> str:
        return f"{self.object_type.label}({self.object_id}) at ({self.x}, {self.y})"
