"""Library resources: books, articles, digital content and theses."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, TextIO


@dataclass
class Resource(ABC):
    """An item held by the library that can be lent out."""

    id: int
    title: str
    author: str
    publication_year: int
    available: bool = field(default=True, kw_only=True)

    resource_type: ClassVar[str]
    label: ClassVar[str]
    detail_label: ClassVar[str]

    @property
    @abstractmethod
    def detail(self) -> str:
        """The value specific to this kind of resource."""

    def describe(self) -> str:
        """Return the multi-line description shown by :meth:`display`."""
        status = "Available" if self.available else "Borrowed"
        return (
            f"{self.label} [{self.id}]\n"
            f"Title: {self.title}\n"
            f"Author: {self.author}\n"
            f"Publication Year: {self.publication_year}\n"
            f"{self.detail_label}: {self.detail}\n"
            f"Status: {status}\n"
        )

    def display(self, file: TextIO | None = None) -> None:
        """Write the description to *file* (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.describe())


@dataclass
class Book(Resource):
    genre: str

    resource_type: ClassVar[str] = "Book"
    label: ClassVar[str] = "Book"
    detail_label: ClassVar[str] = "Genre"

    @property
    def detail(self) -> str:
        return self.genre


@dataclass
class Article(Resource):
    journal_name: str

    resource_type: ClassVar[str] = "Article"
    label: ClassVar[str] = "Article"
    detail_label: ClassVar[str] = "Journal"

    @property
    def detail(self) -> str:
        return self.journal_name


@dataclass
class DigitalContent(Resource):
    file_format: str

    resource_type: ClassVar[str] = "DigitalContent"
    label: ClassVar[str] = "Digital Content"
    detail_label: ClassVar[str] = "File Format"

    @property
    def detail(self) -> str:
        return self.file_format


@dataclass
class Thesis(Resource):
    supervisor: str

    resource_type: ClassVar[str] = "Thesis"
    label: ClassVar[str] = "Thesis"
    detail_label: ClassVar[str] = "Supervisor"

    @property
    def detail(self) -> str:
        return self.supervisor