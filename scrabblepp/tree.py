"""Binary search tree holding the registered player names."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .dot import render_dot


class DuplicatePlayerError(ValueError):
    """Raised when a player name is already in the tree."""


@dataclass
class _Node:
    name: str
    left: _Node | None = None
    right: _Node | None = None


class PlayerTree:
    """Player names kept in alphabetical (byte-wise) order."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def is_empty(self) -> bool:
        """Whether no player has been added."""
        return self._root is None

    def add(self, name: str) -> None:
        """Add a player; raise DuplicatePlayerError if the name exists."""
        node = _Node(name)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if current.name == name:
                raise DuplicatePlayerError(f"player {name!r} already exists")
            if current.name > name:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def search(self, name: str) -> str | None:
        """Return the stored name if present, otherwise None."""
        current = self._root
        while current is not None:
            if current.name == name:
                return current.name
            current = current.left if current.name > name else current.right
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.search(name) is not None

    @staticmethod
    def _inorder(node: _Node | None) -> Iterator[str]:
        if node is not None:
            yield from PlayerTree._inorder(node.left)
            yield node.name
            yield from PlayerTree._inorder(node.right)

    @staticmethod
    def _preorder(node: _Node | None) -> Iterator[str]:
        if node is not None:
            yield node.name
            yield from PlayerTree._preorder(node.left)
            yield from PlayerTree._preorder(node.right)

    @staticmethod
    def _postorder(node: _Node | None) -> Iterator[str]:
        if node is not None:
            yield from PlayerTree._postorder(node.left)
            yield from PlayerTree._postorder(node.right)
            yield node.name

    def inorder(self) -> list[str]:
        """Names in in-order traversal."""
        return list(self._inorder(self._root))

    def preorder(self) -> list[str]:
        """Names in pre-order traversal."""
        return list(self._preorder(self._root))

    def postorder(self) -> list[str]:
        """Names in post-order traversal."""
        return list(self._postorder(self._root))

    @staticmethod
    def _graph_lines(node: _Node | None) -> Iterator[str]:
        if node is None:
            return
        name = node.name
        if node.left is not None and node.right is not None:
            label = f"<HI>|{name}|<HD>"
        elif node.left is not None:
            label = f"<HI>|{name}"
        elif node.right is not None:
            label = f"{name}|<HD>"
        else:
            label = name
        yield f'N_{name}[label ="{label}"]; \n'
        yield from PlayerTree._graph_lines(node.left)
        if node.left is not None:
            yield f"N_{name}:HI -> N_{node.left.name}\n"
        yield from PlayerTree._graph_lines(node.right)
        if node.right is not None:
            yield f"N_{name}:HD -> N_{node.right.name}\n"

    def to_dot(self) -> str:
        """Graphviz description of the tree."""
        body = "".join(self._graph_lines(self._root))
        return (
            "digraph ArbolBB{ \n"
            "\n"
            "rankdir=TB;\n"
            "\n"
            "node [shape = record];\n"
            f"{body}"
            "\n"
            "}\n"
        )

    def render(self, directory: str | Path | None = None) -> Path | None:
        """Write the tree report; nothing is written for an empty tree."""
        if self.is_empty():
            return None
        return render_dot(self.to_dot(), "ArbolABB", directory)