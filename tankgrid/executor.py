"""Grid movement for the player tank, enemy tanks and shells."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

X_MAX = 6
Y_MAX = 5
WIDTH = 2 * X_MAX + 1
HEIGHT = 2 * Y_MAX + 1

_LEFT_TURN = {"E": "N", "N": "W", "W": "S", "S": "E"}
_RIGHT_TURN = {"E": "S", "S": "W", "W": "N", "N": "E"}

_RIGHT_SPAWN = (X_MAX - 2, -Y_MAX)
_LEFT_SPAWN = (-X_MAX + 2, -Y_MAX)
_BLOCK_COUNT = 10


@dataclass(frozen=True)
class Pose:
    """Position and heading on the grid; north decreases y, south increases it."""

    x: int = 0
    y: int = 0
    heading: str = "N"
    is_shoot: bool = field(default=False)

    def left(self) -> Pose:
        """Return the pose turned a quarter to the left."""
        return Pose(self.x, self.y, _LEFT_TURN.get(self.heading, "N"))

    def right(self) -> Pose:
        """Return the pose turned a quarter to the right."""
        return Pose(self.x, self.y, _RIGHT_TURN.get(self.heading, "N"))

    def __add__(self, other: object) -> Pose:
        """Step along the heading by ``other``'s offsets, stopping at the border."""
        if not isinstance(other, Pose):
            return NotImplemented
        x, y = self.x, self.y
        if self.heading == "E":
            if x < X_MAX:
                x += other.x
        elif self.heading == "W":
            if x > -X_MAX:
                x -= other.x
        elif self.heading == "S":
            if y < Y_MAX:
                y += other.y
        elif self.heading == "N":
            if y > -Y_MAX:
                y -= other.y
        return Pose(x, y, self.heading)


_UNIT_STEP = Pose(1, 1, "N")


@dataclass
class Executor:
    """A movable unit that may or may not have been placed."""

    pose: Pose | None = None

    @classmethod
    def with_pose(cls, pose: Pose) -> Executor:
        return cls(pose)

    def execute(self, cmds: str) -> None:
        """Apply ``M`` (move), ``L`` or ``R`` (turn); other commands do nothing."""
        if self.pose is None:
            return
        if cmds == "M":
            self.pose = self.pose + _UNIT_STEP
        elif cmds == "L":
            self.pose = self.pose.left()
        elif cmds == "R":
            self.pose = self.pose.right()

    def query(self) -> tuple[int, int, str]:
        """Return ``(x, y, heading)``; raise ValueError if the unit has no pose."""
        if self.pose is None:
            raise ValueError("executor has no pose")
        return self.pose.x, self.pose.y, self.pose.heading


class CellKind(enum.Enum):
    PLAYER = "player"
    ENEMY = "enemy"
    SHOOT = "shoot"
    PLACE = "place"
    BLOCK = "block"


@dataclass
class MapPlace:
    """One grid cell: its kind and, for units, the unit occupying it."""

    kind: CellKind = CellKind.PLACE
    executor: Executor | None = None


def _empty() -> MapPlace:
    return MapPlace(CellKind.PLACE)


def _unit(kind: CellKind, x: int, y: int, heading: str) -> MapPlace:
    return MapPlace(kind, Executor.with_pose(Pose(x, y, heading)))


def _ahead(executor: Executor) -> tuple[int, int]:
    probe = Executor(executor.pose)
    probe.execute("M")
    x, y, _ = probe.query()
    return x, y


class Executors:
    """The battlefield: a grid of cells plus the bookkeeping for play."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.grid: list[list[MapPlace]] = [
            [_empty() for _ in range(WIDTH)] for _ in range(HEIGHT)
        ]
        for _ in range(_BLOCK_COUNT):
            col = self._rng.randrange(WIDTH)
            row = self._rng.randrange(HEIGHT)
            self.grid[row][col] = MapPlace(CellKind.BLOCK)

        self._set(0, Y_MAX, _unit(CellKind.PLAYER, 0, Y_MAX, "N"))
        self._player_col = X_MAX
        self._player_row = Y_MAX + Y_MAX

        self._enemy_place: list[tuple[int, int]] = []
        for x, y in (_RIGHT_SPAWN, _LEFT_SPAWN):
            self._set(x, y, _unit(CellKind.ENEMY, x, y, "S"))
            self._enemy_place.append((x, y))

        self._shoot_place: list[tuple[int, int]] = []
        self.point = 0
        self.is_lose = False

    def _cell(self, x: int, y: int) -> MapPlace:
        return self.grid[y + Y_MAX][x + X_MAX]

    def _set(self, x: int, y: int, place: MapPlace) -> None:
        self.grid[y + Y_MAX][x + X_MAX] = place

    def spawn(self) -> None:
        """Put a fresh enemy on each spawn point that is free."""
        for x, y in (_RIGHT_SPAWN, _LEFT_SPAWN):
            if self._cell(x, y).kind is CellKind.PLACE:
                self._set(x, y, _unit(CellKind.ENEMY, x, y, "S"))
                self._enemy_place.append((x, y))

    def player_move(self, cmds: str) -> None:
        """Move or turn the player; a move only happens into a free cell."""
        cell = self.grid[self._player_row][self._player_col]
        if cell.kind is not CellKind.PLAYER:
            return
        player = Executor(cell.executor.pose)
        if cmds == "M":
            old_x, old_y, _ = player.query()
            x, y = _ahead(player)
            if self._cell(x, y).kind is CellKind.PLACE:
                player.execute(cmds)
                new_x, new_y, _ = player.query()
                self._player_col = new_x + X_MAX
                self._player_row = new_y + Y_MAX
                self._set(x, y, MapPlace(CellKind.PLAYER, player))
                self._set(old_x, old_y, _empty())
        else:
            player.execute(cmds)
            self.grid[self._player_row][self._player_col] = MapPlace(
                CellKind.PLAYER, player
            )

    def enemy_move(self) -> None:
        """Let every surviving enemy advance or turn at random."""
        new_place: list[tuple[int, int]] = []
        for enemy_x, enemy_y in self._enemy_place:
            cell = self._cell(enemy_x, enemy_y)
            if cell.kind is not CellKind.ENEMY:
                continue
            enemy = Executor(cell.executor.pose)
            behave = self._rng.randrange(6)
            if behave in (0, 3, 4, 5):
                old_x, old_y, _ = enemy.query()
                x, y = _ahead(enemy)
                if self._cell(x, y).kind is CellKind.PLACE:
                    enemy.execute("M")
                    self._set(x, y, MapPlace(CellKind.ENEMY, enemy))
                    new_place.append((x, y))
                    self._set(old_x, old_y, _empty())
                else:
                    if self._rng.randrange(2) == 1:
                        enemy.execute("R")
                    self._set(old_x, old_y, MapPlace(CellKind.ENEMY, enemy))
                    new_place.append((old_x, old_y))
            else:
                enemy.execute("R" if behave == 1 else "L")
                self._set(enemy_x, enemy_y, MapPlace(CellKind.ENEMY, enemy))
                new_place.append((enemy_x, enemy_y))
        self._enemy_place = new_place

    def shoot(self) -> None:
        """Every enemy and the player fire a shell into the free cell ahead."""
        shooters = list(self._enemy_place)
        shooters.append((self._player_col - X_MAX, self._player_row - Y_MAX))
        for sx, sy in shooters:
            cell = self._cell(sx, sy)
            if cell.kind not in (CellKind.ENEMY, CellKind.PLAYER):
                continue
            _, _, heading = cell.executor.query()
            x, y = _ahead(cell.executor)
            if self._cell(x, y).kind is CellKind.PLACE:
                self._set(x, y, _unit(CellKind.SHOOT, x, y, heading))
                self._shoot_place.append((x, y))

    def shoot_move(self) -> None:
        """Advance every shell, resolving hits on shells, tanks and blocks."""
        new_place: list[tuple[int, int]] = []
        for shoot_x, shoot_y in self._shoot_place:
            cell = self._cell(shoot_x, shoot_y)
            if cell.kind is not CellKind.SHOOT:
                continue
            shell = Executor(cell.executor.pose)
            old_x, old_y, _ = shell.query()
            x, y = _ahead(shell)
            target = self._cell(x, y).kind
            if target is CellKind.PLACE:
                shell.execute("M")
                self._set(x, y, MapPlace(CellKind.SHOOT, shell))
                new_place.append((x, y))
                self._set(old_x, old_y, _empty())
                continue
            self._set(x, y, _empty())
            self._set(old_x, old_y, _empty())
            if target is CellKind.ENEMY:
                self.point += 1
            elif target is CellKind.PLAYER:
                self.is_lose = True
        self._shoot_place = new_place