"""Antimeridian clip: split spherical lines at the ±180° meridian and across the poles.

Longitudes and latitudes are radians, with longitude in (-pi, pi]. The strategy
never removes geometry; it reroutes any segment that would wrap around the
sphere so that each emitted sub-line stays on one side of the date line.
"""

from __future__ import annotations

import math
from typing import Sequence

from geoclip.config import get_epsilon
from geoclip.constants import HALF_PI, PI
from geoclip.stream import GeometryStream


def longitude_sign(lam: float) -> float:
    """Return the date-line side of a longitude: +pi if lam > 0, else -pi."""
    return PI if lam > 0 else -PI


def antimeridian_intersect(
    lambda0: float,
    phi0: float,
    lambda1: float,
    phi1: float,
    epsilon: float,
) -> float:
    """Latitude at which the great circle through two points meets the date line.

    Falls back to the mean latitude when sin(lambda0 - lambda1) is within
    epsilon of zero (equal or antipodal longitudes).

    Parameters:
        lambda0, phi0: First point (radians), on one side of the date line.
        lambda1, phi1: Second point (radians), on the other side.
        epsilon: Tolerance for the degenerate denominator.

    Returns:
        Crossing latitude in radians.
    """
    sin_lambda0_lambda1 = math.sin(lambda0 - lambda1)
    if abs(sin_lambda0_lambda1) > epsilon:
        cos_phi0 = math.cos(phi0)
        cos_phi1 = math.cos(phi1)
        return math.atan(
            (
                math.sin(phi0) * cos_phi1 * math.sin(lambda1)
                - math.sin(phi1) * cos_phi0 * math.sin(lambda0)
            )
            / (cos_phi0 * cos_phi1 * sin_lambda0_lambda1)
        )
    return (phi0 + phi1) / 2


class AntimeridianLineClip:
    """Clip state for one line; forwards the rewritten line to ``stream``.

    The previous point (longitude, latitude, sign) is kept from point to point
    and forgotten on ``line_end`` only.
    """

    def __init__(self, stream: GeometryStream, epsilon: float) -> None:
        self._stream = stream
        self._epsilon = epsilon
        self._previous: tuple[float, float, float] | None = None
        self.clean = 0

    def line_start(self) -> None:
        self._stream.line_start()
        self.clean = 1

    def point(self, x: float, y: float, z: float = 0.0) -> None:
        """Consume one point, emitting split points and line breaks as needed."""
        stream = self._stream
        eps = self._epsilon
        lambda1 = x
        phi1 = y
        sign1 = longitude_sign(lambda1)
        if self._previous is not None:
            lambda0, phi0, sign0 = self._previous
            delta = abs(lambda1 - lambda0)
            if abs(delta - PI) < eps:
                # Antipodal longitudes: the segment runs over a pole.
                phi0 = HALF_PI if (phi0 + phi1) / 2 > 0 else -HALF_PI
                stream.point(lambda0, phi0, 0.0)
                stream.point(sign0, phi0, 0.0)
                stream.line_end()
                stream.line_start()
                stream.point(sign1, phi0, 0.0)
                stream.point(lambda1, phi0, 0.0)
                self.clean = 0
            elif sign0 != sign1 and delta >= PI:
                if abs(lambda0 - sign0) < eps:
                    lambda0 -= sign0 * eps
                if abs(lambda1 - sign1) < eps:
                    lambda1 -= sign1 * eps
                phi0 = antimeridian_intersect(lambda0, phi0, lambda1, phi1, eps)
                stream.point(sign0, phi0, 0.0)
                stream.line_end()
                stream.line_start()
                stream.point(sign1, phi0, 0.0)
                self.clean = 0
        self._previous = (lambda1, phi1, sign1)
        stream.point(lambda1, phi1, z)

    def line_end(self) -> None:
        self._stream.line_end()
        self._previous = None


class AntimeridianClip:
    """Clip strategy for the date line and pole singularities.

    Every point is visible; lines are split rather than trimmed. Per-line
    state lives in the objects returned by :meth:`clip_line`, never here.
    """

    def __init__(self, epsilon: float | None = None) -> None:
        self.epsilon = get_epsilon() if epsilon is None else epsilon

    @property
    def start(self) -> tuple[float, float]:
        return (-PI, -HALF_PI)

    def is_visible(self, x: float, y: float) -> bool:
        return True

    def clip_line(self, stream: GeometryStream) -> AntimeridianLineClip:
        return AntimeridianLineClip(stream, self.epsilon)

    def interpolate(
        self,
        from_: Sequence[float] | None,
        to: Sequence[float] | None,
        direction: int,
        stream: GeometryStream,
    ) -> None:
        """Trace the clip boundary from ``from_`` to ``to``.

        With no ``from_`` the whole boundary rectangle is traced, starting and
        ending at (-pi, direction * pi/2). Boundary points on opposite sides of
        the date line are joined over the pole; otherwise ``to`` is emitted.

        Parameters:
            from_: Boundary point (lon, lat) the trace starts at, or None.
            to: Boundary point the trace ends at; required when ``from_`` is given.
            direction: +1 or -1, the winding direction of the ring being closed.
            stream: Output geometry stream.

        Raises:
            ValueError: If ``direction`` is not +1 or -1, or ``to`` is missing
                while ``from_`` is given.
        """
        if direction not in (1, -1):
            raise ValueError(f'direction must be 1 or -1, got {direction!r}')
        if from_ is None:
            phi = direction * HALF_PI
            stream.point(-PI, phi, 0.0)
            stream.point(0.0, phi, 0.0)
            stream.point(PI, phi, 0.0)
            stream.point(PI, 0.0, 0.0)
            stream.point(PI, -phi, 0.0)
            stream.point(0.0, -phi, 0.0)
            stream.point(-PI, -phi, 0.0)
            stream.point(-PI, 0.0, 0.0)
            stream.point(-PI, phi, 0.0)
        elif to is None:
            raise ValueError('interpolate: to is required when from_ is provided')
        elif abs(from_[0] - to[0]) > self.epsilon:
            lam = PI if from_[0] < to[0] else -PI
            phi = direction * lam / 2
            stream.point(-lam, phi, 0.0)
            stream.point(0.0, phi, 0.0)
            stream.point(lam, phi, 0.0)
        else:
            stream.point(to[0], to[1], 0.0)
