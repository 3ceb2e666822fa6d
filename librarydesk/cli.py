"""Command that runs a short lending session on a sample library."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from librarydesk.library import LibrarySystem
from librarydesk.resources import Article, Book, DigitalContent, Thesis
from librarydesk.user import User


def build_demo_library() -> LibrarySystem:
    """Return a library stocked with the sample resources and users."""
    library = LibrarySystem()
    library.add_resource(Book(1, "The Great Gatsby", "F. Scott Fitzgerald", 1925, "Novel"))
    library.add_resource(
        Article(2, "Quantum Computing Advances", "Dr. Jane Doe", 2020, "Nature Journal")
    )
    library.add_resource(DigitalContent(3, "Learn C++", "John Smith", 2021, "PDF"))
    library.add_resource(Thesis(4, "AI in Healthcare", "Alice Johnson", 2022, "Prof. Roberts"))
    library.add_user(User(100, "Maria Ines"))
    library.add_user(User(101, "Elyas"))
    return library


def _show(library: LibrarySystem, stage: str) -> None:
    print(f"\n--- {stage} Resources ---")
    library.display_all_resources()
    print(f"\n--- {stage} Users ---")
    library.display_all_users()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="librarydesk", description="Run a sample library lending session."
    )
    parser.parse_args(argv)

    library = build_demo_library()
    _show(library, "All")

    print("\n--- Borrowing Resource ---")
    library.borrow_resource(100, 2)
    library.borrow_resource(101, 3)
    _show(library, "Updated")

    print("\n--- Returning Resource ---")
    library.return_resource(100, 2)
    _show(library, "Final")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())