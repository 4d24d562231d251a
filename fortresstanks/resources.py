"""Loading and lookup of the game's line meshes."""

from __future__ import annotations

import os
from pathlib import Path

from .line_mesh import LineMesh

MESH_FILES = {
    "Menu": "Menu.txt",
    "UI": "UI.txt",
    "MissileTank": "MissileTank.txt",
    "CanonTank": "CanonTank.txt",
}


class ResourceManager:
    """Holds the named line meshes used by menus, the panel and the tanks."""

    def __init__(self) -> None:
        self._line_meshes: dict[str, LineMesh] = {}

    def init(self, directory: str | os.PathLike = ".") -> None:
        """Load every known mesh from the directory; missing files give empty meshes."""
        base = Path(directory)
        for key, filename in MESH_FILES.items():
            mesh = LineMesh()
            path = base / filename
            if path.is_file():
                mesh.load(path)
            self._line_meshes[key] = mesh

    def clear(self) -> None:
        """Forget every loaded mesh."""
        self._line_meshes.clear()

    def get_line_mesh(self, key: str) -> LineMesh | None:
        """Return the mesh stored under key, or None if there is none."""
        return self._line_meshes.get(key)