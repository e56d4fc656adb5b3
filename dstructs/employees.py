"""Employee records kept in a list and stored in a fixed-size binary file."""

from __future__ import annotations

import argparse
import struct
from dataclasses import dataclass
from operator import attrgetter
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Optional, Union

NAME_SIZE = 10
_RECORD = struct.Struct("<i10s2xif")

PathLike = Union[str, Path]


@dataclass
class Employee:
    """One employee record."""

    no: int
    name: str
    depno: int
    salary: float

    def __post_init__(self) -> None:
        if len(self.name.encode("utf-8")) >= NAME_SIZE:
            raise ValueError(f"name {self.name!r} is longer than {NAME_SIZE - 1} bytes")


def _pack(employee: Employee) -> bytes:
    return _RECORD.pack(
        employee.no, employee.name.encode("utf-8"), employee.depno, employee.salary
    )


def _unpack(fields: tuple) -> Employee:
    no, raw_name, depno, salary = fields
    name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return Employee(no, name, depno, salary)


class EmployeeRegistry:
    """An ordered collection of employees."""

    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._employees = list(employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def __len__(self) -> int:
        return len(self._employees)

    def add(self, employee: Employee) -> None:
        """Put a new employee at the front."""
        self._employees.insert(0, employee)

    def remove(self, no: int) -> Employee:
        """Remove and return the first employee with number ``no``."""
        for index, employee in enumerate(self._employees):
            if employee.no == no:
                return self._employees.pop(index)
        raise KeyError(no)

    def clear(self) -> None:
        """Remove every employee."""
        self._employees.clear()

    def _insertion_sort(self, key: Callable[[Employee], Any]) -> None:
        ordered: list[Employee] = []
        for employee in self._employees:
            k = key(employee)
            pos = next((i for i, o in enumerate(ordered) if not key(o) < k), len(ordered))
            ordered.insert(pos, employee)
        self._employees = ordered

    def sort_by_no(self) -> None:
        """Sort ascending by employee number."""
        self._insertion_sort(attrgetter("no"))

    def sort_by_depno(self) -> None:
        """Sort ascending by department number."""
        self._insertion_sort(attrgetter("depno"))

    def sort_by_salary(self) -> None:
        """Sort ascending by salary."""
        self._insertion_sort(attrgetter("salary"))

    def format_table(self) -> str:
        """Render the employees as a text table."""
        if not self._employees:
            return "  no employee records\n"
        rule = "   " + "-" * 34
        lines = ["    No.      Name  Dept      Salary", rule]
        lines.extend(
            "  %3d%10s    %-8d%7.2f" % (e.no, e.name, e.depno, e.salary)
            for e in self._employees
        )
        lines.append(rule)
        return "\n".join(lines) + "\n"


def load(path: PathLike) -> list[Employee]:
    """Read employees from ``path``; a missing file is created empty."""
    path = Path(path)
    if not path.exists():
        path.touch()
        return []
    data = path.read_bytes()
    usable = len(data) - len(data) % _RECORD.size
    return [_unpack(fields) for fields in _RECORD.iter_unpack(data[:usable])]


def save(path: PathLike, employees: Iterable[Employee]) -> int:
    """Write the employees to ``path`` and return how many were written."""
    records = [_pack(e) for e in employees]
    Path(path).write_bytes(b"".join(records))
    return len(records)


def _read(prompt: str) -> Optional[str]:
    try:
        return input(prompt).strip()
    except EOFError:
        return None


def _add_interactively(registry: EmployeeRegistry) -> None:
    answer = _read("  >> employee number (-1 to return): ")
    if answer is None or answer == "-1":
        return
    fields = _read("  >> name department salary: ")
    try:
        name, depno, salary = (fields or "").split()
        registry.add(Employee(int(answer), name, int(depno), float(salary)))
    except ValueError as exc:
        print(f"  invalid record: {exc}")
        return
    print("  added")


def _delete_interactively(registry: EmployeeRegistry) -> None:
    answer = _read("  >> employee number (-1 to return): ")
    if answer is None or answer == "-1":
        return
    try:
        registry.remove(int(answer))
    except (ValueError, KeyError):
        print("  no such employee")
        return
    print("  deleted")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive employee manager."""
    parser = argparse.ArgumentParser(prog="employees", description="Manage employee records.")
    parser.add_argument("--file", default="emp.dat", help="data file (default: emp.dat)")
    args = parser.parse_args(argv)

    registry = EmployeeRegistry(load(args.file))
    print(f"  employee list loaded with {len(registry)} record(s)")
    while True:
        print(">1:add 2:show 3:sort by number 4:sort by department 5:sort by salary")
        choice = _read(">6:delete 9:delete all 0:quit  choose: ")
        if choice is None or choice == "0":
            break
        if choice == "1":
            _add_interactively(registry)
        elif choice == "2":
            print(registry.format_table(), end="")
        elif choice == "3":
            registry.sort_by_no()
            print("  sorted by employee number")
        elif choice == "4":
            registry.sort_by_depno()
            print("  sorted by department")
        elif choice == "5":
            registry.sort_by_salary()
            print("  sorted by salary")
        elif choice == "6":
            _delete_interactively(registry)
        elif choice == "9":
            Path(args.file).write_bytes(b"")
            registry.clear()
            print("  all employee records cleared")
    count = save(args.file, registry)
    if count:
        print(f"  {count} employee record(s) written to {args.file}")
    else:
        print(f"  no employee records written to {args.file}")
    return 0