"""World state. Plain containers mutated by the game logic; nothing here validates."""

from dataclasses import dataclass, field
from typing import List

COLUMNS = 28
CELL_SLOTS = 4

# Directions
NORTH, EAST, SOUTH, WEST = 0, 1, 2, 3

# Ghost kinds
GHOST1, GHOST2, GHOST3, GHOST4 = 0, 1, 2, 3

# Power kinds
LIFE, INVINCIBILITY = 0, 1


@dataclass
class Position:
    cell_x: int = 0
    cell_y: int = 0
    pos_x: float = 0.0
    pos_y: float = 0.0
    direction: int = NORTH


@dataclass
class Pacman(Position):
    pass


@dataclass
class Power(Position):
    kind: int = LIFE


@dataclass
class Data:
    # rows x COLUMNS cells, CELL_SLOTS values per cell
    grid: List[List[List[str]]] = field(default_factory=list)
    lives: int = 5
    score: int = 1
    pacman: Pacman = field(default_factory=Pacman)
    grid_offset_y: float = 0.0
    invincible: bool = False


def new_data():
    return Data(lives=5, score=1)

def new_power(x, y, kind):
    return Power(cell_x=x, cell_y=y, kind=kind)

def new_grid(rows):
    return [[[""] * CELL_SLOTS for _ in range(COLUMNS)] for _ in range(rows)]
