"""Shared game services handed to scenes and objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .input import InputManager
from .objects import ObjectManager
from .resources import ResourceManager
from .timing import TimeManager
from .ui import UIManager


@dataclass
class Context:
    """The timer, input, panel, resources and objects shared by one running game."""

    time: TimeManager = field(default_factory=TimeManager)
    input: InputManager = field(default_factory=InputManager)
    ui: UIManager = field(default_factory=UIManager)
    resources: ResourceManager = field(default_factory=ResourceManager)
    objects: ObjectManager = field(default_factory=ObjectManager)
    # The scene manager driving this game, once one has been attached.
    scenes: Any = None