"""A sorted collection of unique persons."""

from __future__ import annotations

from typing import Iterable, Iterator

from snplabs.person import Person

_RULE = "--------------------\n"


class DuplicatePersonError(ValueError):
    """The person is already in the list."""


class PersonList:
    """Persons kept in ascending order as defined by ``Person.compare``."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        for person in persons:
            self.insert(person)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __contains__(self, person: object) -> bool:
        return isinstance(person, Person) and self._locate(person)[1]

    def _locate(self, person: Person) -> tuple[int, bool]:
        for index, existing in enumerate(self._persons):
            result = person.compare(existing)
            if result <= 0:
                return index, result == 0
        return len(self._persons), False

    def insert(self, person: Person) -> Person:
        """Insert ``person`` at its sorted place; duplicates are refused."""
        if not isinstance(person, Person):
            raise TypeError(f"expected a Person, got {type(person).__name__}")
        index, found = self._locate(person)
        if found:
            raise DuplicatePersonError(
                "Error: Person already exists in the list (duplicate)."
            )
        self._persons.insert(index, person)
        return person

    def remove(self, person: Person) -> None:
        """Remove the person equal to ``person``; ValueError if there is none."""
        if not isinstance(person, Person):
            raise TypeError(f"expected a Person, got {type(person).__name__}")
        index, found = self._locate(person)
        if not found:
            raise ValueError("person not found in list")
        del self._persons[index]

    def clear(self) -> None:
        """Remove all persons."""
        self._persons.clear()

    def show(self) -> str:
        """A numbered listing of all persons in order."""
        if not self._persons:
            return "List is empty.\n"
        entries = "".join(
            f"Person {number}:\n{person.format()}{_RULE}"
            for number, person in enumerate(self._persons, start=1)
        )
        return _RULE + entries