"""
Command tree descriptors.

A Command is a named, invocable unit: optional help text, an optional action
and an ordered list of children. The tree is built once at startup and handed
to the dispatcher, which renders it into a Typer application.

Example:
    >>> root = Command("advent-of-code")
    >>> root.add(Command("puzzle", help="Show the resolved puzzle."))
    >>> root.resolve(["puzzle"]).name
    'puzzle'
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from .errors import CommandNotFoundError, CommandTreeError, DuplicateCommandError

Action = Callable[..., Any]


@dataclass(eq=False)
class Command:
    """Descriptor for one node of the command tree."""

    name: str
    help: str | None = None
    short_help: str | None = None
    action: Action | None = None
    children: list[Command] = field(default_factory=list)
    parent: Command | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name or any(ch.isspace() for ch in self.name):
            raise CommandTreeError(user_message=f"Invalid command name: {self.name!r}")

        initial, self.children = self.children, []
        for child in initial:
            self.add(child)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_group(self) -> bool:
        """Root commands and commands with children dispatch to subcommands."""
        return self.is_root or bool(self.children)

    def add(self, child: Command) -> Command:
        """Attach a child command and return it.

        Raises:
            DuplicateCommandError: A sibling already uses the child's name.
            CommandTreeError: The child already belongs to another command.
        """
        if child.parent is not None:
            raise CommandTreeError(
                user_message=f"Command '{child.name}' already belongs to '{child.parent.name}'",
            )
        if self.find(child.name) is not None:
            raise DuplicateCommandError(
                user_message=f"Command '{child.name}' is already registered under '{self.name}'",
                name=child.name,
            )
        child.parent = self
        self.children.append(child)
        return child

    def find(self, name: str) -> Command | None:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def resolve(self, path: Sequence[str]) -> Command:
        """Walk the tree by name, starting at this command.

        Raises:
            CommandNotFoundError: Some element of the path is not registered.
        """
        node = self
        for depth, name in enumerate(path):
            found = node.find(name)
            if found is None:
                missing = tuple(path[: depth + 1])
                raise CommandNotFoundError(
                    user_message=f"No such command: {' '.join(missing)}",
                    suggested_action=f"Run '{self.root.name} --help' to list commands",
                    path=missing,
                )
            node = found
        return node

    @property
    def root(self) -> Command:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def path(self) -> tuple[str, ...]:
        """Names from the root (exclusive) down to this command."""
        names: list[str] = []
        node = self
        while node.parent is not None:
            names.append(node.name)
            node = node.parent
        return tuple(reversed(names))

    def walk(self) -> Iterator[tuple[tuple[str, ...], Command]]:
        """Yield (path, command) for every descendant, depth-first."""
        for child in self.children:
            yield child.path, child
            yield from child.walk()
