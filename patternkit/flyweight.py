"""Many trees sharing a few immutable tree types."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TreeType:
    """The shared, intrinsic state of a kind of tree."""

    name: str
    color: str
    texture: str

    def __post_init__(self) -> None:
        print(f"Creating TreeType: {self.name}")

    def display(self, x: int, y: int) -> str:
        """Draw a tree of this type at ``(x, y)`` and return the printed line."""
        line = (
            f"Drawing {self.name} tree at ({x}, {y}) "
            f"with color {self.color} and texture {self.texture}"
        )
        print(line)
        return line


@dataclass
class TreeFactory:
    """Creates each distinct tree type once and hands out the shared instance."""

    types: dict[tuple[str, str, str], TreeType] = field(default_factory=dict)

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        """Return the shared type for these attributes, creating it if new."""
        key = (name, color, texture)
        tree_type = self.types.get(key)
        if tree_type is None:
            tree_type = TreeType(name, color, texture)
            self.types[key] = tree_type
        return tree_type


@dataclass
class Tree:
    """A tree placed at a position, referring to a shared type."""

    x: int
    y: int
    tree_type: TreeType

    def draw(self) -> str:
        """Draw the tree and return the printed line."""
        return self.tree_type.display(self.x, self.y)


def main(argv: list[str] | None = None) -> int:
    """Plant three trees of two shared types and draw them."""
    argparse.ArgumentParser(description="Demonstrate the flyweight.").parse_args(argv)
    factory = TreeFactory()

    oak_type = factory.get_tree_type("Oak", "Green", "Rough")
    pine_type = factory.get_tree_type("Pine", "Dark Green", "Smooth")

    trees = [
        Tree(1, 1, oak_type),
        Tree(2, 3, oak_type),
        Tree(4, 5, pine_type),
    ]
    for tree in trees:
        tree.draw()
    return 0