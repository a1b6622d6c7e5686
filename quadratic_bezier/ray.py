# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Ray - Origin point paired with an (unnormalized) direction vector."""

import numpy as np


class Ray:
    """
    Represent a 3D ray sampled from a curve.

    The direction is kept exactly as given, it is not normalized.
    Unpacks as ``origin, direction``.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin, direction):
        """
        Initialize ray from an origin and a direction.

        Args:
            origin: Origin point [x, y, z]
            direction: Direction vector [x, y, z]

        """
        self.origin = np.array(origin, dtype=float)
        self.direction = np.array(direction, dtype=float)

    def length(self):
        """Calculate length of the direction vector."""
        return float(np.linalg.norm(self.direction))

    def unit_direction(self):
        """
        Calculate normalized direction vector.

        Returns
        -------
        np.ndarray
            Direction scaled to unit length

        Raises
        ------
        ValueError
            If direction is degenerate (zero length)

        """
        length = self.length()
        if length < 1e-9:
            raise ValueError("Ray direction is degenerate (zero length)")
        return self.direction / length

    def point_at(self, t):
        """
        Get point along the ray at parameter t.

        Args:
            t: Parameter value (0 = origin, 1 = origin + direction)

        Returns
        -------
        np.ndarray
            Point at parameter t

        """
        return self.origin + t * self.direction

    def __iter__(self):
        """Yield origin, then direction."""
        yield self.origin
        yield self.direction

    def __eq__(self, other):
        """Compare origin and direction exactly."""
        if not isinstance(other, Ray):
            return NotImplemented
        return (np.array_equal(self.origin, other.origin)
                and np.array_equal(self.direction, other.direction))

    __hash__ = None

    def __repr__(self):
        """Return string representation of ray."""
        return f"Ray(origin={self.origin.tolist()}, direction={self.direction.tolist()})"
