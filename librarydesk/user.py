"""Library members and the resources they hold."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class User:
    """A library member who can borrow resources by id."""

    id: int
    name: str
    borrowed_resource_ids: list[int] = field(default_factory=list)

    def borrow(self, resource_id: int) -> None:
        """Record that the resource is now held by this user."""
        self.borrowed_resource_ids.append(resource_id)

    def give_back(self, resource_id: int) -> None:
        """Drop every record of the resource from this user's loans."""
        self.borrowed_resource_ids = [
            held for held in self.borrowed_resource_ids if held != resource_id
        ]

    def has_borrowed(self, resource_id: int) -> bool:
        return resource_id in self.borrowed_resource_ids

    def describe_borrowed(self) -> str:
        """Return the line listing the ids of borrowed resources."""
        ids = "".join(f"{held} " for held in self.borrowed_resource_ids)
        return f"User {self.name} has borrowed resources with IDs: {ids}"

    def display_borrowed_resources(self, file: TextIO | None = None) -> None:
        print(self.describe_borrowed(), file=file if file is not None else sys.stdout)