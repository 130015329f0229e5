"""Drive a toy tick-based simulation with the profiler installed and print the report."""

import argparse
import logging
import random
import sys
from pathlib import Path

# Add backend directory to Python path
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from tickprof import ProcessHost, RegistryEntry, get_settings, init_profiler


class Room:
    def __init__(self, name: str, size: int = 50) -> None:
        self.name = name
        self.size = size
        self._energy = 300

    @property
    def energy(self) -> int:
        return self._energy

    @energy.setter
    def energy(self, value: int) -> None:
        self._energy = max(0, value)

    def find_path(self, start: tuple, goal: tuple) -> list:
        path = [start]
        x, y = start
        while (x, y) != goal:
            x += (goal[0] > x) - (goal[0] < x)
            y += (goal[1] > y) - (goal[1] < y)
            path.append((x, y))
        return path


class Creep:
    def __init__(self, room: Room) -> None:
        self.room = room
        self.pos = (random.randrange(room.size), random.randrange(room.size))

    def move_to(self, goal: tuple) -> int:
        path = self.room.find_path(self.pos, goal)
        self.pos = path[min(1, len(path) - 1)]
        return len(path)

    def harvest(self) -> None:
        self.room.energy = self.room.energy + sum(i * i for i in range(200))


GAME_OBJECTS = [
    RegistryEntry(type=Room, label="Room"),
    RegistryEntry(type=Creep, label="Creep"),
]


def run(ticks: int, window: int) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    host = ProcessHost()
    profiler = init_profiler(host, GAME_OBJECTS, settings=settings, sink=print)
    print(profiler.start(window))

    room = Room("W1N1")
    creeps = [Creep(room) for _ in range(10)]
    for _ in range(ticks):
        for creep in creeps:
            creep.move_to((25, 25))
            creep.harvest()
        profiler.end_tick()
        host.advance()

    print(profiler.status())


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--ticks", type=int, default=30)
    parser.add_argument("--window", type=int, default=20, help="Ticks to profile before the report")
    args = parser.parse_args()
    run(args.ticks, args.window)
