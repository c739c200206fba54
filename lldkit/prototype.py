"""Prototype pattern: files and folders that clone themselves."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class Node(ABC):
    """A named entry in a directory tree."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def render(self, indent: str) -> str:
        """Return the tree below this node as text, one entry per line."""

    def print_tree(self, indent: str) -> None:
        print(self.render(indent))

    @abstractmethod
    def clone(self) -> Node:
        """Return a deep copy whose names end in ``_clone``."""


class File(Node):
    def render(self, indent: str) -> str:
        return indent + self.name

    def clone(self) -> File:
        return File(self.name + "_clone")


class Folder(Node):
    def __init__(self, name: str, children: Iterable[Node] = ()) -> None:
        super().__init__(name)
        self.children: list[Node] = list(children)

    def add_child(self, node: Node) -> None:
        self.children.append(node)

    def render(self, indent: str) -> str:
        lines = [indent + self.name]
        lines.extend(child.render(indent + indent) for child in self.children)
        return "\n".join(lines)

    def clone(self) -> Folder:
        return Folder(self.name + "_clone", (child.clone() for child in self.children))