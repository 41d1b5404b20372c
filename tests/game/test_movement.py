import random

from slidepuzzle.game.board import Board, CellType, Direction
from slidepuzzle.game.board_builder import create_puzzle
from slidepuzzle.game.movement import SlideResolver, slide
from slidepuzzle.game.objects import ObjectType


def player_of(board):
    return board.get_objects_by_type(ObjectType.PLAYER)[0]


def block_positions(board):
    return [block.position for block in board.get_objects_by_type(ObjectType.BLOCK)]


class TestSlide:
    def test_blocked_by_wall_is_idempotent(self):
        board = Board.from_strings(["_P#"])
        player = player_of(board)

        assert not slide(board, player, 1, 0)
        assert player.position == (1, 0)
        assert not slide(board, player, 1, 0)
        assert player.position == (1, 0)

    def test_blocked_by_edge(self):
        board = Board.from_strings(["_P"])
        player = player_of(board)

        assert not slide(board, player, 1, 0)
        assert not slide(board, player, 0, 1)
        assert not slide(board, player, 0, -1)
        assert player.position == (1, 0)

    def test_friction_stop_on_empty(self):
        board = Board.from_strings(["P._"])
        player = player_of(board)

        assert slide(board, player, 1, 0)
        assert player.position == (1, 0)

    def test_friction_stop_on_goal(self):
        board = Board.from_strings(["P_G__"])
        player = player_of(board)

        assert slide(board, player, 1, 0)
        assert player.position == (2, 0)
        assert board.cell_at(*player.position) == CellType.GOAL

    def test_ice_run_stops_before_wall(self):
        board = Board.from_strings(["P___#"])
        player = player_of(board)

        assert slide(board, player, 1, 0)
        assert player.position == (3, 0)

    def test_ice_run_stops_at_edge(self):
        board = Board.from_strings(["P____"])
        player = player_of(board)

        assert slide(board, player, 1, 0)
        assert player.position == (4, 0)

    def test_ice_run_stops_before_object(self):
        board = Board.from_strings(["P__B_#"])
        player = player_of(board)

        assert slide(board, player, 1, 0)
        assert player.position == (2, 0)
        assert block_positions(board) == [(3, 0)]

    def test_vertical_slide(self):
        board = Board.from_strings(["P", "_", "_", "#"])
        player = player_of(board)

        assert slide(board, player, 0, 1)
        assert player.position == (0, 2)

        assert slide(board, player, 0, -1)
        assert player.position == (0, 0)

    def test_push_chain(self):
        board = Board.from_strings(["PBB_"])
        player = player_of(board)

        assert slide(board, player, 1, 0)
        assert block_positions(board) == [(2, 0), (3, 0)]
        assert player.position == (1, 0)

    def test_pushed_block_slides_until_stopped(self):
        board = Board.from_strings(["PB___#"])
        player = player_of(board)

        assert slide(board, player, 1, 0)
        assert block_positions(board) == [(4, 0)]
        assert player.position == (3, 0)

    def test_pushed_block_stops_on_empty(self):
        board = Board.from_strings(["PB_.__"])
        player = player_of(board)

        assert slide(board, player, 1, 0)
        assert block_positions(board) == [(3, 0)]
        assert player.position == (2, 0)

    def test_push_against_wall_moves_nothing(self):
        board = Board.from_strings(["PB#"])
        player = player_of(board)

        assert not slide(board, player, 1, 0)
        assert player.position == (0, 0)
        assert block_positions(board) == [(1, 0)]

    def test_push_against_edge_moves_nothing(self):
        board = Board.from_strings(["_PBB"])
        player = player_of(board)

        assert not slide(board, player, 1, 0)
        assert player.position == (1, 0)
        assert block_positions(board) == [(2, 0), (3, 0)]

    def test_pusher_on_friction_cell_stays_after_push(self):
        # The player's first cell is plain floor, so it stops there after the push.
        board = Board.from_strings(["PB__"])
        board.set_cell_type(1, 0, CellType.EMPTY)
        player = player_of(board)

        assert slide(board, player, 1, 0)
        assert block_positions(board) == [(3, 0)]
        assert player.position == (1, 0)

    def test_block_not_adjacent_is_not_pushed(self):
        board = Board.from_strings(["P_B_#"])
        player = player_of(board)

        assert slide(board, player, 1, 0)
        assert player.position == (1, 0)
        assert block_positions(board) == [(2, 0)]

    def test_blocks_can_be_slid_directly(self):
        board = Board.from_strings(["B__#"])
        block = board.get_objects_by_type(ObjectType.BLOCK)[0]

        assert slide(board, block, 1, 0)
        assert block.position == (2, 0)

    def test_zero_vector_is_noop(self):
        board = Board.from_strings(["_P_"])
        player = player_of(board)

        assert not slide(board, player, 0, 0)
        assert player.position == (1, 0)

    def test_slide_never_leaves_board_or_overlaps(self):
        rng = random.Random(7)
        directions = list(Direction)

        for seed in range(10):
            board = create_puzzle(8, 6, 8, 6, 5, seed=seed)
            objects = list(board.iter_objects())

            for _ in range(60):
                game_object = rng.choice(objects)
                direction = rng.choice(directions)
                slide(board, game_object, direction.dx, direction.dy)

                positions = [obj.position for obj in objects]
                assert all(board.is_on_board(x, y) for x, y in positions)
                assert len(set(positions)) == len(positions)


class TestSlideResolver:
    def test_slide_with_direction(self):
        board = Board.from_strings(["#__P"])
        resolver = SlideResolver(board)
        player = player_of(board)

        assert resolver.slide(player, Direction.LEFT)
        assert player.position == (1, 0)

    def test_slide_all_reports_pushed_objects(self):
        board = Board.from_strings(["PBB_"])
        resolver = SlideResolver(board)
        player = player_of(board)

        movements = resolver.slide_all([player], 1, 0)

        assert movements == {
            "player_0": ((0, 0), (1, 0)),
            "block_1": ((1, 0), (2, 0)),
            "block_2": ((2, 0), (3, 0)),
        }

    def test_slide_all_empty_when_blocked(self):
        board = Board.from_strings(["P#"])
        resolver = SlideResolver(board)

        assert resolver.slide_all([player_of(board)], 1, 0) == {}
