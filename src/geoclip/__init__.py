"""Spherical antimeridian clipping for geographic line geometry.

This package provides the antimeridian clip strategy of a geographic
projection toolkit:
- Clip contract: start point, visibility test, per-line clip, boundary trace
- Antimeridian strategy: splits lines at the date line and across the poles
- Array and GeoJSON helpers, plus a small command-line front end

Coordinates are (longitude, latitude) in radians unless a helper says otherwise.
"""

from geoclip.clip import AntimeridianClip, AntimeridianLineClip, Clip, LineClip
from geoclip.stream import GeometryStream, LineRecorder

__all__: list[str] = [
    'AntimeridianClip',
    'AntimeridianLineClip',
    'Clip',
    'GeometryStream',
    'LineClip',
    'LineRecorder',
]
