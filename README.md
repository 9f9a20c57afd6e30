# snakeboard

A small snake game that runs in your terminal.

The board is 30 columns by 15 rows and has a `#` border. The snake's head is
drawn as `@`. When the snake moves onto the border, it comes back in on the
opposite side. The board always holds five pieces of food:

- three regular pieces, `*`. Eating one makes the snake one segment longer
  and scores 1 point.
- two special pieces, `0`. Eating one scores 10 points and does not change
  the snake's length.

After the snake eats any piece, all five pieces are placed again. No piece is
placed on the snake or on another piece. The game ends when the head runs
into the snake's own body. The message `Oopsie! You self collided :(` stays on
the screen for two seconds, and then the game shows your final score.

## Installing

```
pip install .
```

The game needs only the standard library. It uses the `curses` module for
the screen. Standard Python on Windows does not include `curses`, so on
Windows you must install a package that provides it.

## Playing

```
snakeboard
```

| Key   | Action     |
|-------|------------|
| `w`   | move up    |
| `a`   | move left  |
| `s`   | move down  |
| `d`   | move right |
| `Esc` | quit       |

The snake stays still until you press a direction key. It cannot reverse
straight into itself. Below the board, the screen shows the head position and
the current score. The board is redrawn about every 0.1 seconds. When the
game ends, press any key to close it.

`snakeboard --help` shows a short usage message. The command takes no other
options.

## Using it from Python

You can use the parts of the game on their own:

- `snakeboard.objpos.ObjPos` is a frozen dataclass with `x`, `y` and `symbol`.
  It provides `is_pos_equal()` and `symbol_if_pos_equal()`.
- `snakeboard.poslist.PosList` is an ordered list of positions with the head at
  index 0. Its capacity defaults to 200. It provides `insert_head()`,
  `insert_tail()`, `remove_head()`, `remove_tail()`, `clear()`, `head()`,
  `tail()`, indexing, iteration and `len()`. An insert into a full list is
  ignored and returns `False`. A remove from an empty list does nothing.
  `head()` and `tail()` on an empty list raise `IndexError`.
- `snakeboard.food.Food(rng=None)` holds the current food in `positions`.
  `generate(snake)` replaces the food with three regular pieces and two
  special pieces. Pieces are always placed inside a 30 by 15 board.
  `generate()` raises `ValueError` if there are too few free cells.
- `snakeboard.player.Player(mechs, food)` is the snake. Its `body` is a
  `PosList`. It provides `update_direction()`, `move()`,
  `check_food_consumption()`, which returns a `FoodKind`,
  `check_self_collision()` and `grow()`. `Direction` and `FoodKind` are enums
  in the same module.
- `snakeboard.game_mechs.GameMechs(board_x=30, board_y=15, terminal=None)` holds
  the board size, the score, the latest key and the exit and lose flags.
- `snakeboard.ui.Terminal(screen)` wraps a curses-style window and reads keys
  without blocking.
- `snakeboard.game.run_logic(mechs, player, food)` runs one game step and
  returns what was eaten. `snakeboard.game.render(mechs, player, food)` returns
  the frame as text. `snakeboard.game.run(screen)` plays a whole game on a
  window and returns the final score.

## What it does not do

The game does not keep high scores and saves nothing between games. You
cannot set the board size, the speed or the keys from the command line.

## Running the tests

```
pip install .[test]
pytest
```