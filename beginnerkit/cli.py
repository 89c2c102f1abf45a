"""Interactive command line for the linked-list menu and matrix multiplication."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from beginnerkit.linked_lists import DoublyLinkedList, EmptyListError
from beginnerkit.matrix import DimensionError, format_matrix, multiply

__all__ = ["main"]

MENU = (
    "Enter 1 to insert at the beginning.\n"
    "Enter 2 to insert at the end.\n"
    "Enter 3 to insert position wise.\n"
    "Enter 4 to count number of node& display the data.\n"
    "Enter 5 to Delete at the beginning.\n"
    "Enter 6 to delete at the end.\n"
    "Enter 7 to delete position wise.\n"
    "Enter 8 to display the linked list.\n"
    "Enter any other number to exit."
)


def _read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _run_list_menu() -> int:
    items = DoublyLinkedList()
    print(MENU)
    while True:
        try:
            choice = _read_int("Enter your choice: ")
        except (EOFError, ValueError):
            return 0
        try:
            if choice == 1:
                items.push_front(_read_int("Enter the data: "))
            elif choice == 2:
                if not len(items):
                    raise EmptyListError
                items.push_back(_read_int("Enter the data: "))
            elif choice == 3:
                if not len(items):
                    raise EmptyListError
                position = _read_int("Enter the position: \n")
                items.insert_after(position, _read_int("Enter the data: "))
            elif choice == 4:
                print(f"No. of nodes present is: {len(items)}")
            elif choice == 5:
                items.pop_front()
                print("Node deleted successfully...")
            elif choice == 6:
                items.pop_back()
                print("Last node deleted successfully...")
            elif choice == 7:
                items.remove_at(_read_int("Enter the position you want to delete: "))
                print("Node deleted successfully...")
            elif choice == 8:
                if not len(items):
                    raise EmptyListError
                for value in items:
                    print(value)
            else:
                return 0
        except EmptyListError:
            print("No node present.")
        except IndexError:
            print("Invalid position.")
        except ValueError:
            print("Invalid number.")
        except EOFError:
            return 0


def _read_matrix(name: str) -> list[list[int]]:
    rows = _read_int(f"Enter number of Rows of matrix {name}: ")
    cols = _read_int(f"Enter number of Cols of matrix {name}: ")
    print(f"\nEnter elements of matrix {name}: ")
    return [
        [_read_int(f"Enter element [{i + 1},{j + 1}] : ") for j in range(cols)]
        for i in range(rows)
    ]


def _run_matrix() -> int:
    try:
        a = _read_matrix("a")
        b = _read_matrix("b")
    except (EOFError, ValueError):
        print("\nInvalid input.")
        return 1
    try:
        result = multiply(a, b)
    except DimensionError:
        print("\nMultiplication can not be done.")
        return 0
    print("\nMatrix after multiplying elements (result matrix):")
    print(format_matrix(result), end="")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen interactive program and return its exit status."""
    parser = argparse.ArgumentParser(prog="beginnerkit")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="edit a doubly linked list from a menu")
    commands.add_parser("matrix", help="read two matrices and multiply them")
    args = parser.parse_args(argv)
    if args.command == "list":
        return _run_list_menu()
    return _run_matrix()


if __name__ == "__main__":
    raise SystemExit(main())