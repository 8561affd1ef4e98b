"""Clip strategies: shared contract and the antimeridian implementation."""

from geoclip.clip.antimeridian import (
    AntimeridianClip,
    AntimeridianLineClip,
    antimeridian_intersect,
    longitude_sign,
)
from geoclip.clip.base import Clip, LineClip

__all__: list[str] = [
    'AntimeridianClip',
    'AntimeridianLineClip',
    'Clip',
    'LineClip',
    'antimeridian_intersect',
    'longitude_sign',
]
