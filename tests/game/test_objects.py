from slidepuzzle.game.objects import GameObject, ObjectType


class TestGameObject:
    def test_object_creation(self):
        player = GameObject(ObjectType.PLAYER, 2, 3, "player_0")
        assert player.x == 2
        assert player.y == 3
        assert player.position == (2, 3)
        assert player.object_id == "player_0"
        assert player.object_type == ObjectType.PLAYER

    def test_move_to(self):
        block = GameObject(ObjectType.BLOCK, 0, 0, "block_0")
        block.move_to(3, 4)
        assert block.position == (3, 4)

    def test_identity_not_value_equality(self):
        a = GameObject(ObjectType.BLOCK, 1, 1, "block_0")
        b = a.copy()
        assert a is not b
        assert a != b
        assert b.position == a.position
        assert b.object_id == a.object_id

    def test_to_dict(self):
        block = GameObject(ObjectType.BLOCK, 4, 5, "block_7")
        assert block.to_dict() == {
            "object_id": "block_7",
            "type": "block",
            "x": 4,
            "y": 5,
        }

    def test_object_type_display_attributes(self):
        for object_type in ObjectType:
            assert len(object_type.color) == 3
            assert len(object_type.symbol) == 1
        assert ObjectType.PLAYER.symbol != ObjectType.BLOCK.symbol
