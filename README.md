# tankgrid

A small arcade game played on a 13 × 11 grid. You steer a tank with three
commands (turn left, move forward, turn right) while enemy tanks wander
the board, every tank fires shots on a fixed clock, and ten randomly placed
blocks get in the way. A shot that hits an enemy earns a point; a shot that
hits you ends the game.

The package has no dependencies outside the standard library. The game
window uses `tkinter`, so the Python in use needs Tk support.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
tankgrid
```

Press **Start** to set the game clock running. After that the **L**, **M**
and **R** buttons turn your tank left, move it one square forward (only if
that square is empty), or turn it right. Before Start is pressed the
buttons do nothing.

| Glyph          | Meaning                          |
|----------------|----------------------------------|
| `+`            | empty square                     |
| `#`            | block                            |
| `^ > v <`      | a tank and the way it is facing  |
| `·`            | a shot in flight                 |

Your tank (green) starts at the bottom middle of the board facing north.
Two enemies (red) start on the top row facing south, and whenever their
starting squares are free again a new enemy appears there at the next spawn
event. Once started, the clock:

- spawns enemies at once and then every 10 seconds,
- moves enemies every second from 3 seconds on,
- moves shots every 1.5 seconds from 5.5 seconds on,
- makes every tank fire every 4.5 seconds from 7.5 seconds on.

A shot that runs into another shot, a tank or a block removes both itself
and what it hit. When your tank is hit, "Game Over" is shown and the clock
stops. Closing the window asks for confirmation first.

## Using the game logic directly

The rules live in `tankgrid.executor` and need no window.

A single unit is an `Executor` holding a `Pose` (`x`, `y` and a heading,
one of `"N"`, `"E"`, `"S"`, `"W"`; north lowers `y`, south raises it).
Commands are `"M"`, `"L"` and `"R"`; anything else leaves the pose
unchanged. Movement stops at the edge of the board. `query()` returns
`(x, y, heading)` and raises `ValueError` for an executor with no pose.

```python
from tankgrid.executor import Executor, Pose

car = Executor.with_pose(Pose(0, 0, "N"))
for cmd in "LLLLRRRR":
    car.execute(cmd)
car.execute("M")
car.execute("L")
print(car.query())
```

The whole board is an `Executors` instance. Its `grid` is a list of rows of
`MapPlace` cells, each with a `kind` (`CellKind.PLAYER`, `ENEMY`, `SHOOT`,
`PLACE` or `BLOCK`) and, for units, an `executor`. Pass a `random.Random`
to make block placement and enemy behaviour repeatable:

```python
import random
from tankgrid.executor import Executors

board = Executors(rng=random.Random(1))
board.player_move("R")  # turn the player's tank
board.player_move("M")  # move it forward if the square ahead is empty
board.enemy_move()      # every enemy steps forward or turns at random
board.shoot()           # every tank fires into the empty square ahead
board.shoot_move()      # shots advance and hits are resolved
board.spawn()           # fill free enemy starting squares
print(board.point, board.is_lose)
```

`tankgrid.play` holds the game clock: `send_message(tx, rx)` puts
`AppMessage` events on the queue `tx` on the schedule above until anything
arrives on the queue `rx`.

`tankgrid.gui` holds `GameSession`, which ties the board, the clock and the
player's commands together without drawing anything: `start()` starts the
clock, `tick()` advances one frame and applies one pending event every
tenth frame, `player_command(cmd)` steers once started, and
`request_close()` / `answer_close(confirmed)` track the close dialog.
`cell_glyph(cell)` gives the character for one square, and `create_gui()`
opens the window that the `tankgrid` command runs.

## What it does not do

There is no keyboard control, no pause, no restart after Game Over (start
the program again) and no saved scores.