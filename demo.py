# demo.py

import time
from dataclasses import dataclass
from typing import Optional

import matplotlib.pyplot as plt

from config import DEFAULT_ROWS, DEFAULT_COLS, DEMO_STEP_DELAY
from grid_view import plot_grid
from layout_engine import LayoutEngine

SCRIPT = [
    "add a 2 2 2 4",
    "add b 4 2 2 4",
    "add c 0 2 2 2",
    "rm b",
    "add d 4 2 2 3",
    "add e 2 2 2 4",
    "add f 2 2 2 4",
    "rm f",
    "add g 2 2 2 4",
    "rm a",
    "mv c 1 0",
    "mv c 2 0",
    "mv c 2 2",
    "mv c 3 2",
    "mv c 4 10",
    "mv c 4 6",
    "mv d 1 1",
    "mv c 4 6",
    "mv e 2 15",
    "mv c 2 17",
    "mv c 4 6",
    "mv e 1 2",
]


@dataclass
class Instruction:
    action: str          # "add", "mv", "rm" or "invalid"
    id: Optional[str] = None
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    raw: str = ""


def parse_instruction(line):
    """Parse `add <id> <x> <y> <w> <h>`, `mv <id> <x> <y>` or `rm <id>`."""
    parts = line.split()
    action = parts[0] if parts else ""

    try:
        if action == "add" and len(parts) >= 6:
            x, y, w, h = (int(p) for p in parts[2:6])
            return Instruction("add", parts[1], x, y, w, h, raw=line)
        if action == "mv" and len(parts) >= 4:
            x, y = int(parts[2]), int(parts[3])
            return Instruction("mv", parts[1], x, y, raw=line)
        if action == "rm" and len(parts) >= 2:
            return Instruction("rm", parts[1], raw=line)
    except ValueError:
        pass

    return Instruction("invalid", raw=line)


def handle_instruction(engine, instruction):
    if instruction.action == "add":
        print(f"Adding item {instruction.id} at ({instruction.x}, {instruction.y}) "
              f"size {instruction.w}x{instruction.h}")
        engine.add_item(instruction.id, instruction.x, instruction.y, instruction.w, instruction.h)
    elif instruction.action == "mv":
        print(f"Moving item {instruction.id} to ({instruction.x}, {instruction.y})")
        engine.move_item(instruction.id, instruction.x, instruction.y)
    elif instruction.action == "rm":
        print(f"Removing item {instruction.id} from the grid")
        engine.remove_item(instruction.id)
    else:
        print(f"Invalid interaction: {instruction.raw}")
        return

    engine.view().print_grid()


def run_script(instructions=SCRIPT, rows=DEFAULT_ROWS, cols=DEFAULT_COLS, delay=DEMO_STEP_DELAY):
    print("Grid App")

    engine = LayoutEngine(rows, cols)
    engine.add_listener(lambda event: print(f"Event triggered: {event}"))

    for line in instructions:
        handle_instruction(engine, parse_instruction(line))
        if delay:
            time.sleep(delay)

    return engine


if __name__ == "__main__":
    engine = run_script()
    plot_grid(engine.view(), title="Final layout")
    plt.show()
