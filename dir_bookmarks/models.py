"""Data models for the directory bookmark store."""

from __future__ import annotations

import os
from dataclasses import dataclass

from attrs import Factory, define
from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(slots=True, frozen=True)
class Bookmark:
    """A name mapped to an absolute filesystem path."""

    name: str
    path: str

    def to_model(self) -> BookmarkEntryModel:
        """Convert the bookmark into a serialisable pydantic model."""
        return BookmarkEntryModel(name=self.name, path=self.path)

    @classmethod
    def from_model(cls, model: BookmarkEntryModel) -> Bookmark:
        """Create a bookmark from a validated pydantic model."""
        return cls(name=model.name, path=model.path)


class BookmarkEntryModel(BaseModel):
    """Pydantic model for a single persisted bookmark."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    path: str

    @field_validator("path")
    @classmethod
    def _require_absolute(cls, value: str) -> str:
        if not os.path.isabs(value):
            msg = f"bookmark path must be absolute, got {value!r}"
            raise ValueError(msg)
        return value


class BookmarkFileModel(BaseModel):
    """Root object of the bookmarks file; unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")

    bookmarks: list[BookmarkEntryModel] = Field(default_factory=list)

    @field_validator("bookmarks", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return [] if value is None else value

    def to_collection(self) -> BookmarkCollection:
        """Convert the validated file contents into an in-memory collection."""
        return BookmarkCollection([Bookmark.from_model(m) for m in self.bookmarks])


@define(slots=True)
class BookmarkCollection:
    """Ordered bookmark records in insertion order."""

    bookmarks: list[Bookmark] = Factory(list)

    def __len__(self) -> int:
        return len(self.bookmarks)

    def find_by_name(self, name: str) -> Bookmark | None:
        """Return the first bookmark whose name matches exactly."""
        for bookmark in self.bookmarks:
            if bookmark.name == name:
                return bookmark
        return None

    def find_by_path(self, path: str) -> Bookmark | None:
        """Return the first bookmark pointing at ``path``."""
        for bookmark in self.bookmarks:
            if bookmark.path == path:
                return bookmark
        return None

    def append(self, bookmark: Bookmark) -> None:
        """Add a bookmark at the end of the collection."""
        self.bookmarks.append(bookmark)

    def remove(self, name: str) -> Bookmark | None:
        """Remove and return the first bookmark named ``name``."""
        for index, bookmark in enumerate(self.bookmarks):
            if bookmark.name == name:
                del self.bookmarks[index]
                return bookmark
        return None

    def to_model(self) -> BookmarkFileModel:
        """Convert the collection into the persisted root model."""
        return BookmarkFileModel(bookmarks=[b.to_model() for b in self.bookmarks])
