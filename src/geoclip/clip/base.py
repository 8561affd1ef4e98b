"""Clip strategy contract (start point, visibility, line clip, boundary trace)."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from geoclip.stream import GeometryStream


@runtime_checkable
class LineClip(Protocol):
    """Per-line clip state: a geometry stream that rewrites one line into its output.

    ``clean`` is 1 while the line has passed through untouched and 0 once any
    split was emitted. A ring stitcher reads it after ``line_end``.
    """

    clean: int

    def point(self, x: float, y: float, z: float = 0.0) -> None: ...

    def line_start(self) -> None: ...

    def line_end(self) -> None: ...


@runtime_checkable
class Clip(Protocol):
    """Pluggable clipping policy used by a clip-rewrite / ring-stitching engine."""

    @property
    def start(self) -> tuple[float, float]:
        """Seed point for a ring synthesized with no known prior boundary point."""
        ...

    def is_visible(self, x: float, y: float) -> bool:
        """Return True if the raw point lies inside the clip region."""
        ...

    def clip_line(self, stream: GeometryStream) -> LineClip:
        """Return a fresh per-line clip state writing to ``stream``."""
        ...

    def interpolate(
        self,
        from_: Sequence[float] | None,
        to: Sequence[float] | None,
        direction: int,
        stream: GeometryStream,
    ) -> None:
        """Emit the boundary trace between two boundary points to ``stream``."""
        ...
