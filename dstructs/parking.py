"""A narrow parking lot (a stack) with a waiting lane (a circular queue) in front of it."""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Optional

from dstructs.queues import CircularQueue

DEFAULT_CAPACITY = 3
DEFAULT_QUEUE_CAPACITY = 4
DEFAULT_PRICE = 2


class Place(Enum):
    """Where an arriving car ends up."""

    LOT = "lot"
    QUEUE = "queue"


class ParkingLot:
    """A dead-end lot: cars behind a leaving car back out and return in order.

    The waiting lane is a ring of ``queue_capacity`` slots and so holds
    ``queue_capacity - 1`` cars. A waiting car entering the lot is charged
    from the moment it enters.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        queue_capacity: int = DEFAULT_QUEUE_CAPACITY,
        price: int = DEFAULT_PRICE,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.price = price
        self._lot: list[tuple[int, int]] = []
        self._queue = CircularQueue(queue_capacity)

    def arrive(self, no: int, time: int) -> tuple[Place, int]:
        """Park car ``no`` or put it in the waiting lane; return where and at which position."""
        if len(self._lot) < self.capacity:
            self._lot.append((no, time))
            return Place.LOT, len(self._lot)
        if self._queue.is_full():
            raise OverflowError("the waiting lane is full")
        self._queue.enqueue(no)
        return Place.QUEUE, len(self._queue)

    def depart(self, no: int, time: int) -> int:
        """Remove car ``no`` from the lot and return its fee."""
        index = next((k for k, (car, _) in enumerate(self._lot) if car == no), None)
        if index is None:
            raise KeyError(no)
        _, arrived = self._lot.pop(index)
        if not self._queue.is_empty():
            self._lot.append((self._queue.dequeue(), time))
        return (time - arrived) * self.price

    def parked(self) -> list[int]:
        """Return the cars in the lot, the one nearest the entrance first."""
        return [car for car, _ in reversed(self._lot)]

    def waiting(self) -> list[int]:
        """Return the cars in the waiting lane, front first."""
        return list(self._queue)


def _read(prompt: str) -> Optional[str]:
    try:
        return input(prompt).strip()
    except EOFError:
        return None


def _read_pair(prompt: str) -> Optional[tuple[int, int]]:
    answer = _read(prompt)
    if answer is None:
        return None
    try:
        no, time = (int(field) for field in answer.split())
    except ValueError:
        return None
    return no, time


def _show(label: str, cars: list[int]) -> None:
    print(f"  {label}: " + " ".join(str(car) for car in cars))


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive parking lot simulation."""
    parser = argparse.ArgumentParser(prog="parking", description="Simulate a parking lot.")
    parser.parse_args(argv)

    lot = ParkingLot()
    while True:
        command = _read(">command (1:arrive 2:depart 3:lot 4:waiting lane 0:quit): ")
        if command is None or command == "0":
            if lot.parked():
                _show("cars in the lot", lot.parked())
            if lot.waiting():
                _show("cars waiting", lot.waiting())
            break
        if command == "1":
            pair = _read_pair("  car number and arrival time: ")
            if pair is None:
                print("  invalid input")
                continue
            try:
                place, position = lot.arrive(*pair)
            except OverflowError:
                print("  the waiting lane is full, cannot park")
                continue
            if place is Place.LOT:
                print(f"  parked at lot position {position}")
            else:
                print(f"  waiting at position {position}")
        elif command == "2":
            pair = _read_pair("  car number and departure time: ")
            if pair is None:
                print("  invalid input")
                continue
            try:
                fee = lot.depart(*pair)
            except KeyError:
                print("  no car with that number")
                continue
            print(f"  parking fee for car {pair[0]}: {fee}")
        elif command == "3":
            if lot.parked():
                _show("cars in the lot", lot.parked())
            else:
                print("  the lot is empty")
        elif command == "4":
            if lot.waiting():
                _show("cars waiting", lot.waiting())
            else:
                print("  no cars waiting")
        else:
            print("  unknown command")
    return 0