"""A clinic waiting line: patients queue by case number and are called in order."""

from __future__ import annotations

import argparse
from typing import Optional

from dstructs.queues import LinkedQueue


class Clinic:
    """Patients waiting to see the doctor, identified by unique case numbers."""

    def __init__(self) -> None:
        self._queue = LinkedQueue()

    def join(self, no: int) -> None:
        """Add patient ``no`` to the end of the line."""
        if no in self._queue:
            raise ValueError(f"patient {no} is already waiting")
        self._queue.enqueue(no)

    def call_next(self) -> int:
        """Remove and return the patient at the front of the line."""
        if self._queue.is_empty():
            raise IndexError("no patients waiting")
        return self._queue.dequeue()

    def waiting(self) -> list[int]:
        """Return the waiting patients, front first."""
        return list(self._queue)

    def close(self) -> list[int]:
        """Empty the line and return the patients who were still waiting."""
        remaining = self.waiting()
        self._queue = LinkedQueue()
        return remaining


def _read(prompt: str) -> Optional[str]:
    try:
        return input(prompt).strip()
    except EOFError:
        return None


def _read_new_number(clinic: Clinic) -> bool:
    prompt = "  patient number: "
    while True:
        answer = _read(prompt)
        if answer is None:
            return False
        try:
            clinic.join(int(answer))
            return True
        except ValueError:
            prompt = "  duplicate or invalid number, enter again: "


def _numbers(values: list[int]) -> str:
    return " ".join(str(v) for v in values)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive clinic simulation."""
    parser = argparse.ArgumentParser(prog="clinic", description="Simulate a clinic queue.")
    parser.parse_args(argv)

    clinic = Clinic()
    while True:
        choice = _read(
            ">1:join 2:see doctor 3:show queue 4:no more arrivals, see the rest 5:close  choose: "
        )
        if choice is None:
            clinic.close()
            break
        if choice == "1":
            if not _read_new_number(clinic):
                clinic.close()
                break
        elif choice == "2":
            try:
                print(f"  >> patient {clinic.call_next()} sees the doctor")
            except IndexError:
                print("  no patients waiting")
        elif choice == "3":
            waiting = clinic.waiting()
            if waiting:
                print(f"  >> waiting: {_numbers(waiting)}")
            else:
                print("  no patients waiting")
        elif choice == "4":
            remaining = clinic.close()
            if remaining:
                print(f"  >> patients are seen in this order: {_numbers(remaining)}")
            else:
                print("  >> no patients waiting")
            break
        elif choice == "5":
            if clinic.close():
                print("  waiting patients please come back tomorrow")
            break
    return 0