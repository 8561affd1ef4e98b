"""Geometry stream protocol (point / line start / line end) and a recording sink."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import numpy as np


class GeometryStream(Protocol):
    """Push-style consumer of spherical or planar geometry events."""

    def point(self, x: float, y: float, z: float = 0.0) -> None: ...

    def line_start(self) -> None: ...

    def line_end(self) -> None: ...


class LineRecorder:
    """Geometry stream that keeps every emitted line as a list of (x, y, z) tuples.

    A point received outside an open line starts an implicit line, so bare
    point runs (e.g. a boundary trace) are recorded as well.
    """

    def __init__(self) -> None:
        self.lines: list[list[tuple[float, float, float]]] = []
        self._open = False

    def point(self, x: float, y: float, z: float = 0.0) -> None:
        if not self._open:
            self.lines.append([])
            self._open = True
        self.lines[-1].append((x, y, z))

    def line_start(self) -> None:
        self.lines.append([])
        self._open = True

    def line_end(self) -> None:
        self._open = False

    def as_arrays(self) -> list[np.ndarray]:
        """Return each recorded line as an (n, 3) float64 array."""
        import numpy as np

        return [np.array(line, dtype=np.float64).reshape(-1, 3) for line in self.lines]
