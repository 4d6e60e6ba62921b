import random

import pytest

from tankgrid.executor import (
    CellKind,
    Executor,
    Executors,
    MapPlace,
    Pose,
)

HARMLESS_BLOCK = (-6, 0)


class ScriptedRng:
    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


def make_board(blocks=(), rolls=()):
    blocks = list(blocks) + [HARMLESS_BLOCK] * (10 - len(blocks))
    values = []
    for x, y in blocks:
        values += [x + 6, y + 5]
    values += list(rolls)
    return Executors(ScriptedRng(values))


def cell(board, x, y):
    return board.grid[y + 5][x + 6]


def heading_at(board, x, y):
    return cell(board, x, y).executor.query()[2]


# Cases carried over from the source's own tests; expected values follow the
# grid convention that north decreases y.
def test_go_straight_stops_at_border():
    car = Executor.with_pose(Pose(0, 0, "N"))
    for _ in range(10):
        car.execute("M")
    assert car == Executor.with_pose(Pose(0, -5, "N"))


def test_go_circle():
    car = Executor.with_pose(Pose(0, 0, "N"))
    for cmd in "LLLLRRRRML":
        car.execute(cmd)
    assert car == Executor.with_pose(Pose(0, -1, "W"))


def test_left_turns_cycle():
    pose = Pose(1, 2, "N")
    seen = []
    for _ in range(4):
        pose = pose.left()
        seen.append(pose.heading)
    assert seen == ["W", "S", "E", "N"]
    assert (pose.x, pose.y) == (1, 2)


def test_right_turns_cycle():
    pose = Pose(0, 0, "N")
    seen = []
    for _ in range(4):
        pose = pose.right()
        seen.append(pose.heading)
    assert seen == ["E", "S", "W", "N"]


def test_unknown_heading_turns_to_north():
    assert Pose(0, 0, "Q").left().heading == "N"
    assert Pose(0, 0, "Q").right().heading == "N"


@pytest.mark.parametrize(
    "start, expected",
    [
        (Pose(0, 0, "E"), Pose(1, 0, "E")),
        (Pose(6, 0, "E"), Pose(6, 0, "E")),
        (Pose(0, 0, "W"), Pose(-1, 0, "W")),
        (Pose(-6, 0, "W"), Pose(-6, 0, "W")),
        (Pose(0, 0, "S"), Pose(0, 1, "S")),
        (Pose(0, 5, "S"), Pose(0, 5, "S")),
        (Pose(0, 0, "N"), Pose(0, -1, "N")),
        (Pose(0, -5, "N"), Pose(0, -5, "N")),
        (Pose(2, 3, "X"), Pose(2, 3, "X")),
    ],
)
def test_pose_add_steps_within_bounds(start, expected):
    assert start + Pose(1, 1, "N") == expected


def test_pose_default_and_shoot_flag():
    assert Pose() == Pose(0, 0, "N")
    assert Pose(0, 0, "N", True) != Pose(0, 0, "N")
    assert (Pose(0, 0, "E", True) + Pose(1, 1, "N")).is_shoot is False


def test_executor_without_pose():
    car = Executor()
    car.execute("M")
    assert car.pose is None
    with pytest.raises(ValueError):
        car.query()


def test_unknown_command_is_ignored():
    car = Executor.with_pose(Pose(1, 1, "E"))
    car.execute("X")
    assert car.query() == (1, 1, "E")


def test_initial_layout():
    board = make_board()
    assert len(board.grid) == 11
    assert all(len(row) == 13 for row in board.grid)
    assert cell(board, 0, 5).kind is CellKind.PLAYER
    assert cell(board, 0, 5).executor.query() == (0, 5, "N")
    assert cell(board, 4, -5).executor.query() == (4, -5, "S")
    assert cell(board, -4, -5).executor.query() == (-4, -5, "S")
    assert cell(board, *HARMLESS_BLOCK).kind is CellKind.BLOCK
    kinds = [c.kind for row in board.grid for c in row]
    assert kinds.count(CellKind.BLOCK) == 1
    assert kinds.count(CellKind.ENEMY) == 2
    assert board.point == 0
    assert board.is_lose is False


def test_player_overwrites_block_at_spawn():
    board = make_board(blocks=[(0, 5)])
    assert cell(board, 0, 5).kind is CellKind.PLAYER


def test_seeded_board_has_units():
    board = Executors(random.Random(7))
    kinds = [c.kind for row in board.grid for c in row]
    assert kinds.count(CellKind.PLAYER) == 1
    assert kinds.count(CellKind.ENEMY) == 2
    assert 1 <= kinds.count(CellKind.BLOCK) <= 10


def test_player_moves_and_turns():
    board = make_board()
    board.player_move("M")
    assert cell(board, 0, 5).kind is CellKind.PLACE
    assert cell(board, 0, 4).executor.query() == (0, 4, "N")
    board.player_move("L")
    assert heading_at(board, 0, 4) == "W"
    board.player_move("M")
    assert cell(board, -1, 4).executor.query() == (-1, 4, "W")


def test_player_blocked_by_block():
    board = make_board(blocks=[(0, 4)])
    board.player_move("M")
    assert cell(board, 0, 5).kind is CellKind.PLAYER
    assert cell(board, 0, 4).kind is CellKind.BLOCK


def test_player_at_border_does_not_move():
    board = make_board()
    board.player_move("L")
    board.player_move("L")
    board.player_move("M")
    assert cell(board, 0, 5).executor.query() == (0, 5, "S")


def test_shoot_places_shells_ahead():
    board = make_board()
    board.shoot()
    assert cell(board, 0, 4).kind is CellKind.SHOOT
    assert cell(board, 4, -4).kind is CellKind.SHOOT
    assert cell(board, -4, -4).kind is CellKind.SHOOT
    assert heading_at(board, 0, 4) == "N"
    assert heading_at(board, 4, -4) == "S"


def test_shells_advance():
    board = make_board()
    board.shoot()
    board.shoot_move()
    assert cell(board, 0, 4).kind is CellKind.PLACE
    assert cell(board, 0, 3).kind is CellKind.SHOOT
    assert cell(board, 4, -3).kind is CellKind.SHOOT
    assert cell(board, -4, -3).kind is CellKind.SHOOT


def test_shell_hitting_enemy_scores():
    board = make_board()
    board.grid[3 + 5][0 + 6] = MapPlace(
        CellKind.ENEMY, Executor.with_pose(Pose(0, 3, "S"))
    )
    board.shoot()
    board.shoot_move()
    assert board.point == 1
    assert cell(board, 0, 3).kind is CellKind.PLACE
    assert cell(board, 0, 4).kind is CellKind.PLACE


def test_shell_hitting_block_clears_both():
    board = make_board(blocks=[(0, 3)])
    board.shoot()
    board.shoot_move()
    assert cell(board, 0, 3).kind is CellKind.PLACE
    assert cell(board, 0, 4).kind is CellKind.PLACE
    assert board.point == 0


def test_enemy_shell_hits_player():
    board = make_board()
    board.player_move("R")
    for _ in range(4):
        board.player_move("M")
    assert cell(board, 4, 5).executor.query() == (4, 5, "E")
    board.shoot()
    for _ in range(9):
        board.shoot_move()
    assert board.is_lose is True
    assert cell(board, 4, 5).kind is CellKind.PLACE
    assert board.point == 0


def test_opposing_shells_cancel():
    board = make_board()
    board.player_move("R")
    for _ in range(4):
        board.player_move("M")
    board.player_move("L")
    board.shoot()
    for _ in range(4):
        board.shoot_move()
    column = [cell(board, 4, y).kind for y in range(-4, 5)]
    assert CellKind.SHOOT not in column
    assert board.is_lose is False


def test_enemy_move_forward_and_turn():
    board = make_board(rolls=[0, 1])
    board.enemy_move()
    assert cell(board, 4, -5).kind is CellKind.PLACE
    assert cell(board, 4, -4).executor.query() == (4, -4, "S")
    assert heading_at(board, -4, -5) == "W"


def test_enemy_turns_left():
    board = make_board(rolls=[2, 2])
    board.enemy_move()
    assert heading_at(board, 4, -5) == "E"
    assert heading_at(board, -4, -5) == "E"


def test_blocked_enemy_may_turn_right():
    board = make_board(blocks=[(4, -4)], rolls=[3, 1, 4, 0])
    board.enemy_move()
    assert heading_at(board, 4, -5) == "W"
    assert cell(board, -4, -4).kind is CellKind.ENEMY


def test_blocked_enemy_may_stay():
    board = make_board(blocks=[(4, -4)], rolls=[5, 0, 1])
    board.enemy_move()
    assert heading_at(board, 4, -5) == "S"
    assert heading_at(board, -4, -5) == "W"


def test_destroyed_enemy_is_skipped():
    board = make_board(rolls=[1])
    board.grid[0][2] = MapPlace(CellKind.PLACE)
    board.enemy_move()
    assert heading_at(board, 4, -5) == "W"
    assert cell(board, -4, -5).kind is CellKind.PLACE


def test_spawn_fills_free_spawn_points():
    board = make_board(rolls=[0, 1])
    board.enemy_move()
    board.spawn()
    assert cell(board, 4, -5).executor.query() == (4, -5, "S")
    assert heading_at(board, -4, -5) == "W"
    kinds = [c.kind for row in board.grid for c in row]
    assert kinds.count(CellKind.ENEMY) == 3


def test_spawned_enemy_joins_movement():
    board = make_board(rolls=[0, 1, 2, 2, 2])
    board.enemy_move()
    board.spawn()
    board.enemy_move()
    assert heading_at(board, 4, -4) == "E"
    assert heading_at(board, -4, -5) == "S"
    assert heading_at(board, 4, -5) == "E"