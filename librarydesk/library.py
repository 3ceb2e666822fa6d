"""The library catalogue, its members and lending."""

from __future__ import annotations

import sys
from typing import TextIO

from librarydesk.notification import Notification
from librarydesk.resources import Resource
from librarydesk.user import User

SEPARATOR = "------------------------\n"


class LibrarySystem:
    """Holds resources and users and lends resources between them.

    Outcome notifications are written to *output* (standard output when None).
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._resources: list[Resource] = []
        self._users: list[User] = []
        self._output = output

    @property
    def resources(self) -> tuple[Resource, ...]:
        return tuple(self._resources)

    @property
    def users(self) -> tuple[User, ...]:
        return tuple(self._users)

    def add_resource(self, resource: Resource) -> None:
        self._resources.append(resource)

    def add_user(self, user: User) -> None:
        self._users.append(user)

    def find_resource(self, resource_id: int) -> Resource | None:
        """Return the first resource with this id, or None."""
        return next((r for r in self._resources if r.id == resource_id), None)

    def find_user(self, user_id: int) -> User | None:
        """Return the first user with this id, or None."""
        return next((u for u in self._users if u.id == user_id), None)

    def _notify(self, message: str) -> None:
        Notification(message).send(self._output)

    def borrow_resource(self, user_id: int, resource_id: int) -> bool:
        """Lend a resource to a user; report and return whether it worked."""
        resource = self.find_resource(resource_id)
        user = self.find_user(user_id)
        if resource is not None and user is not None and resource.available:
            resource.available = False
            user.borrow(resource_id)
            self._notify("Resource borrowed successfully.")
            return True
        self._notify("Borrowing failed.")
        return False

    def return_resource(self, user_id: int, resource_id: int) -> bool:
        """Take a resource back from a user; report and return whether it worked."""
        resource = self.find_resource(resource_id)
        user = self.find_user(user_id)
        if resource is not None and user is not None and user.has_borrowed(resource_id):
            resource.available = True
            user.give_back(resource_id)
            self._notify("Resource returned successfully.")
            return True
        self._notify("Returning failed.")
        return False

    def display_all_resources(self, file: TextIO | None = None) -> None:
        out = file if file is not None else sys.stdout
        for resource in self._resources:
            out.write(resource.describe())
            out.write(SEPARATOR)

    def display_all_users(self, file: TextIO | None = None) -> None:
        out = file if file is not None else sys.stdout
        for user in self._users:
            out.write(f"User ID: {user.id} | Name: {user.name}\n")
            out.write(user.describe_borrowed() + "\n")
            out.write(SEPARATOR)