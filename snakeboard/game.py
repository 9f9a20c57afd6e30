"""The game loop: logic, drawing and the command entry point."""

from __future__ import annotations

import argparse

from .food import Food
from .game_mechs import GameMechs
from .player import FoodKind, Player
from .ui import Terminal

FRAME_DELAY = 0.1
COLLISION_PAUSE = 2.0
SPECIAL_POINTS = 10


def run_logic(mechs, player, food) -> FoodKind:
    """Advance one frame: steer, move, eat, and check for a collision."""
    player.update_direction()
    player.move()
    mechs.clear_input()

    eaten = player.check_food_consumption()
    if eaten is FoodKind.REGULAR:
        player.grow()
        food.generate(player.body)
        mechs.increment_score()
    elif eaten is FoodKind.SPECIAL:
        food.generate(player.body)
        mechs.increment_score(SPECIAL_POINTS)

    if player.check_self_collision():
        mechs.set_lose()
    return eaten


def render(mechs, player, food) -> str:
    """Return the text of one frame: board, head position and score."""
    body_cells: dict[tuple[int, int], str] = {}
    for part in player.body:
        body_cells.setdefault((part.x, part.y), part.symbol)
    food_cells: dict[tuple[int, int], str] = {}
    for item in food.positions:
        food_cells.setdefault((item.x, item.y), item.symbol)

    rows = []
    for y in range(mechs.board_y):
        row = []
        for x in range(mechs.board_x):
            if (x, y) in body_cells:
                row.append(body_cells[(x, y)])
            elif (x, y) in food_cells:
                row.append(food_cells[(x, y)])
            elif y in (0, mechs.board_y - 1) or x in (0, mechs.board_x - 1):
                row.append("#")
            else:
                row.append(" ")
        rows.append("".join(row) + "\n")

    head = player.body.head()
    text = "".join(rows)
    text += f"Current head pos: <{head.x},{head.y}>\nCurrent Score: {mechs.score}\n"
    if player.check_self_collision():
        text += "Oopsie! You self collided :( \n"
    return text


def run(screen) -> int:
    """Play a game on a curses-style window; return the final score."""
    terminal = Terminal(screen)
    terminal.clear()

    mechs = GameMechs(30, 15, terminal)
    food = Food()
    player = Player(mechs, food)
    food.generate(player.body)

    while not mechs.exit_flag:
        mechs.read_input()
        run_logic(mechs, player, food)
        terminal.clear()
        terminal.write(render(mechs, player, food))
        if player.check_self_collision():
            terminal.delay(COLLISION_PAUSE)
        terminal.delay(FRAME_DELAY)

    terminal.clear()
    if mechs.lose_flag:
        terminal.write(f"Final score: {mechs.score}")
    terminal.wait_for_key()
    return mechs.score


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="snakeboard",
        description="Terminal snake: w/a/s/d to steer, ESC to quit.",
    )
    parser.parse_args(argv)

    import curses

    curses.wrapper(run)
    return 0