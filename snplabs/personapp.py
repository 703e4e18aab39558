"""Menu-driven management of a sorted list of persons."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from snplabs.person import PersonInputError, read_person
from snplabs.personlist import DuplicatePersonError, PersonList

_MENU_BUFFER = 10
_PROMPT = "\nI(nsert), R(emove), S(how), C(lear), E(nd): "


def _menu_choice(stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(_PROMPT)
    line = stdin.readline(_MENU_BUFFER - 1)
    if not line:
        return ""
    char = line[0]
    return char.upper() if "a" <= char <= "z" else char


def _insert(people: PersonList, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
    stdout.write("--- Insert Person ---\n")
    try:
        person = read_person(stdin, stdout)
    except PersonInputError as error:
        stderr.write(f"{error}\n")
        stderr.write("Error: Invalid person data entered. Operation cancelled.\n")
        return
    try:
        people.insert(person)
    except DuplicatePersonError as error:
        stderr.write(f"{error}\n")
        stderr.write("Error: Could not insert person. Memory full or duplicate?\n")
    else:
        stdout.write("Person inserted successfully.\n")


def _remove(people: PersonList, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
    stdout.write("--- Remove Person ---\n")
    stdout.write("Enter data of person to remove:\n")
    try:
        person = read_person(stdin, stdout)
    except PersonInputError as error:
        stderr.write(f"{error}\n")
        stderr.write(
            "Error: Invalid person data entered for removal. Operation cancelled.\n"
        )
        return
    try:
        people.remove(person)
    except ValueError:
        stdout.write("Person not found in list.\n")
    else:
        stdout.write("Person removed successfully.\n")


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """Run the menu loop; return 0 on a regular end, 1 when input runs out."""
    people = PersonList()
    stdout.write("Personenverwaltung V1.0\n")
    while True:
        choice = _menu_choice(stdin, stdout)
        if choice == "I":
            _insert(people, stdin, stdout, stderr)
        elif choice == "R":
            _remove(people, stdin, stdout, stderr)
        elif choice == "S":
            stdout.write("--- Show Persons ---\n")
            stdout.write(people.show())
        elif choice == "C":
            stdout.write("--- Clear List ---\n")
            people.clear()
            stdout.write("List cleared.\n")
        elif choice == "E":
            stdout.write("--- End Program ---\n")
            people.clear()
            stdout.write("Goodbye!\n")
            return 0
        elif choice == "":
            stderr.write("\nError reading input or EOF detected. Exiting.\n")
            people.clear()
            return 1
        else:
            stderr.write(f"Error: Invalid choice '{choice}'. Please try again.\n")


def main(argv: list[str] | None = None) -> int:
    """Manage persons interactively on standard input and output."""
    argparse.ArgumentParser(description="Manage a sorted list of persons.").parse_args(argv)
    return run(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())