"""Array front end: clip (n, 2) coordinate arrays through the antimeridian strategy."""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from geoclip.clip.antimeridian import AntimeridianClip
from geoclip.clip.base import Clip
from geoclip.constants import DEGREES, PI, RADIANS, TAU
from geoclip.stream import LineRecorder

logger = logging.getLogger(__name__)


def wrap_longitude(values: np.ndarray | Iterable[float]) -> np.ndarray:
    """Wrap longitudes (radians) outside [-pi, pi] into (-pi, pi].

    Values already within [-pi, pi] are returned unchanged, so -pi keeps its
    western side.
    """
    lon = np.asarray(values, dtype=np.float64)
    wrapped = PI - np.mod(PI - lon, TAU)
    return np.where((lon < -PI) | (lon > PI), wrapped, lon)


def _as_coords(coords: np.ndarray | Iterable[Iterable[float]]) -> np.ndarray:
    arr = np.asarray(coords, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] not in (2, 3):
        raise ValueError(f'coordinates must have shape (n, 2) or (n, 3), got {arr.shape}')
    return arr


def clip_line(
    coords: np.ndarray | Iterable[Iterable[float]],
    *,
    degrees: bool = True,
    clip: Clip | None = None,
) -> list[np.ndarray]:
    """Clip one line and return its parts as (m, 2) arrays in the input units.

    Parameters:
        coords: (n, 2) longitude/latitude pairs, or (n, 3) with a payload
            column forwarded as z.
        degrees: If True, coordinates are degrees; otherwise radians.
        clip: Clip strategy; defaults to a new AntimeridianClip.

    Returns:
        One array per emitted sub-line; empty list for an empty line.

    Raises:
        ValueError: If coords does not have shape (n, 2) or (n, 3).
    """
    arr = _as_coords(coords)
    if len(arr) == 0:
        return []
    if clip is None:
        clip = AntimeridianClip()
    scale = RADIANS if degrees else 1.0
    lon = wrap_longitude(arr[:, 0] * scale)
    lat = arr[:, 1] * scale
    payload = arr[:, 2] if arr.shape[1] == 3 else np.zeros(len(arr))

    recorder = LineRecorder()
    line = clip.clip_line(recorder)
    line.line_start()
    for x, y, z in zip(lon.tolist(), lat.tolist(), payload.tolist()):
        line.point(x, y, z)
    line.line_end()

    unscale = DEGREES if degrees else 1.0
    parts = [part[:, :2] * unscale for part in recorder.as_arrays() if len(part) > 0]
    if len(parts) > 1:
        logger.debug('Line of %d points clipped into %d parts', len(arr), len(parts))
    return parts


def clip_lines(
    lines: Iterable[np.ndarray | Iterable[Iterable[float]]],
    *,
    degrees: bool = True,
    clip: Clip | None = None,
) -> list[np.ndarray]:
    """Clip each line in turn and return all parts in order."""
    if clip is None:
        clip = AntimeridianClip()
    parts: list[np.ndarray] = []
    for coords in lines:
        parts.extend(clip_line(coords, degrees=degrees, clip=clip))
    return parts


def boundary(direction: int = 1, *, degrees: bool = True, clip: Clip | None = None) -> np.ndarray:
    """Full clip boundary trace (interpolate with no from point) as an (n, 2) array."""
    if clip is None:
        clip = AntimeridianClip()
    recorder = LineRecorder()
    clip.interpolate(None, None, direction, recorder)
    points = np.concatenate(recorder.as_arrays())[:, :2]
    return points * DEGREES if degrees else points

