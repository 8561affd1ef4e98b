"""GeoJSON adapter: clip line geometries (degrees) at the antimeridian.

Positions are handled one by one, so a line may mix [lon, lat] and
[lon, lat, alt] positions. Altitude and any further elements of an input
position are kept on that position. Split points inserted by the clip get
the mean altitude of the two input positions they fall between, when both
have one, and are 2D otherwise.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from geoclip.arrays import wrap_longitude
from geoclip.clip.antimeridian import AntimeridianClip
from geoclip.clip.base import Clip
from geoclip.constants import DEGREES, RADIANS
from geoclip.stream import LineRecorder

logger = logging.getLogger(__name__)

_PASS_THROUGH = ('Point', 'MultiPoint')
# Rings need the external ring stitcher; they are returned unchanged.
_UNCLIPPED = ('Polygon', 'MultiPolygon')


def _position(value: Any) -> list[float]:
    if not isinstance(value, Sequence) or isinstance(value, str) or len(value) < 2:
        raise ValueError(f'GeoJSON position must have at least two numbers, got {value!r}')
    try:
        return [float(v) for v in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f'GeoJSON position must be numeric, got {value!r}') from e


def _clip_positions(coords: Sequence[Any], clip: Clip) -> list[list[list[float]]]:
    """Clip one line of positions and return its parts as position lists."""
    positions = [_position(p) for p in coords]
    if not positions:
        return []

    # z carries the 1-based input index; inserted points arrive with z == 0.
    recorder = LineRecorder()
    line = clip.clip_line(recorder)
    line.line_start()
    for i, pos in enumerate(positions):
        lon = float(wrap_longitude(pos[0] * RADIANS))
        line.point(lon, pos[1] * RADIANS, float(i + 1))
    line.line_end()

    parts: list[list[list[float]]] = []
    last = 0
    for recorded in recorder.lines:
        part: list[list[float]] = []
        for x, y, z in recorded:
            out = [x * DEGREES, y * DEGREES]
            index = int(z) - 1
            if index >= 0:
                last = index
                out.extend(positions[index][2:])
            else:
                before = positions[last]
                after = positions[min(last + 1, len(positions) - 1)]
                if len(before) > 2 and len(after) > 2:
                    out.append((before[2] + after[2]) / 2)
            part.append(out)
        if part:
            parts.append(part)
    return parts


def clip_geometry(geometry: dict[str, Any], clip: Clip | None = None) -> dict[str, Any]:
    """Return a clipped copy of a GeoJSON geometry object.

    A LineString stays a LineString while it has at most one part and becomes
    a MultiLineString when split. A MultiLineString stays a MultiLineString.
    Points pass through; polygons pass through with a warning.

    Parameters:
        geometry: GeoJSON geometry mapping with longitude/latitude in degrees.
        clip: Clip strategy; defaults to a new AntimeridianClip.

    Returns:
        New geometry mapping.

    Raises:
        ValueError: If the geometry type is missing or unsupported, or a
            position is malformed.
    """
    if clip is None:
        clip = AntimeridianClip()
    gtype = geometry.get('type')
    if gtype == 'LineString':
        parts = _clip_positions(geometry.get('coordinates') or [], clip)
        if len(parts) <= 1:
            return {'type': 'LineString', 'coordinates': parts[0] if parts else []}
        return {'type': 'MultiLineString', 'coordinates': parts}
    if gtype == 'MultiLineString':
        parts = []
        for coords in geometry.get('coordinates') or []:
            parts.extend(_clip_positions(coords, clip))
        return {'type': 'MultiLineString', 'coordinates': parts}
    if gtype == 'GeometryCollection':
        return {
            'type': 'GeometryCollection',
            'geometries': [clip_geometry(g, clip) for g in geometry.get('geometries', [])],
        }
    if gtype in _PASS_THROUGH:
        return dict(geometry)
    if gtype in _UNCLIPPED:
        logger.warning('%s geometry passed through without antimeridian clipping', gtype)
        return dict(geometry)
    raise ValueError(f'Unsupported GeoJSON geometry type: {gtype!r}')


def clip_geojson(obj: dict[str, Any], clip: Clip | None = None) -> dict[str, Any]:
    """Clip a GeoJSON geometry, Feature, or FeatureCollection; properties are kept."""
    if clip is None:
        clip = AntimeridianClip()
    otype = obj.get('type')
    if otype == 'FeatureCollection':
        out = dict(obj)
        out['features'] = [clip_geojson(f, clip) for f in obj.get('features', [])]
        return out
    if otype == 'Feature':
        out = dict(obj)
        geometry = obj.get('geometry')
        out['geometry'] = None if geometry is None else clip_geometry(geometry, clip)
        return out
    if otype is None:
        raise ValueError('GeoJSON object has no "type" member')
    return clip_geometry(obj, clip)
