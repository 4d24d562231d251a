"""Game objects and the registry that owns them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum, auto
from typing import TypeVar

import pygame

from .geometry import Stat, Vector


class ObjectType(Enum):
    NONE = auto()
    PLAYER = auto()
    MISSILE = auto()
    ENEMY = auto()


class MoveDir(Enum):
    LEFT = auto()
    RIGHT = auto()


class GameObject(ABC):
    """Something in the world that updates and draws itself each frame."""

    def __init__(self, object_type: ObjectType = ObjectType.NONE) -> None:
        self.object_type = object_type
        self.move_dir = MoveDir.RIGHT
        self.stat = Stat()
        self.pos = Vector()
        self.radius = 0.0

    @abstractmethod
    def init(self) -> None:
        """Set up the object's starting state."""

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the object."""


T = TypeVar("T", bound=GameObject)


class ObjectManager:
    """Keeps the live objects, each at most once, in insertion order."""

    def __init__(self) -> None:
        self._objects: list[GameObject] = []

    @property
    def objects(self) -> list[GameObject]:
        """A snapshot of the live objects, safe to iterate while adding or removing."""
        return list(self._objects)

    def _index(self, obj: GameObject) -> int | None:
        return next((i for i, item in enumerate(self._objects) if item is obj), None)

    def add(self, obj: GameObject | None) -> None:
        """Add an object unless it is None or already present."""
        if obj is None or self._index(obj) is not None:
            return
        self._objects.append(obj)

    def remove(self, obj: GameObject | None) -> None:
        """Remove an object if it is present."""
        if obj is None:
            return
        index = self._index(obj)
        if index is not None:
            del self._objects[index]

    def clear(self) -> None:
        """Remove every object."""
        self._objects.clear()

    def create_object(self, factory: Callable[[], T]) -> T:
        """Build an object and initialise it; it is not added."""
        obj = factory()
        if not isinstance(obj, GameObject):
            raise TypeError(f"{obj!r} is not a GameObject")
        obj.init()
        return obj