"""Composite pattern: search through files and nested folders alike."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod


def _q(text: str) -> str:
    return json.dumps(text)


class FileSystemNode(ABC):
    """A file or a folder."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def search(self, keyword: str) -> list[str]:
        """Search for the keyword; return the names of the files searched."""


class File(FileSystemNode):
    def search(self, keyword: str) -> list[str]:
        print(f"Searching for keyword {_q(keyword)} in file {_q(self.name)}")
        return [self.name]


class Folder(FileSystemNode):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.children: list[FileSystemNode] = []

    def add(self, child: FileSystemNode) -> None:
        self.children.append(child)

    def search(self, keyword: str) -> list[str]:
        print(f"Serching recursively for keyword {_q(keyword)} in folder {_q(self.name)}")
        searched: list[str] = []
        for child in self.children:
            searched.extend(child.search(keyword))
        return searched