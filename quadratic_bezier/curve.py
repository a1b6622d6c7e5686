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

"""QuadraticBezierCurve - Immutable quadratic Bezier curve in 3D space."""

import numpy as np
from scipy import integrate

from .ray import Ray


def lerp(a, b, t):
    """
    Linearly interpolate between a and b without clamping t.

    Written as ``(1 - t) * a + t * b`` so that t=0 gives a and t=1 gives b
    exactly.
    """
    return (1.0 - t) * a + t * b


def get_point(start, control, end, t):
    """
    Calculate position of a point along a quadratic Bezier curve.

    Args:
        start: Starting point [x, y, z]
        control: Control point [x, y, z]
        end: Ending point [x, y, z]
        t: Curve parameter, or a 1D array of parameters. Values outside
            [0, 1] extrapolate past the end points.

    Returns
    -------
    np.ndarray
        Point of shape (3,), or shape (n, 3) for n parameters

    """
    start = np.asarray(start, dtype=float)
    control = np.asarray(control, dtype=float)
    end = np.asarray(end, dtype=float)
    t = _as_parameter(t)

    q0 = lerp(start, control, t)
    q1 = lerp(control, end, t)
    return lerp(q0, q1, t)


def segment_length(sample_count):
    """
    Parameter step between consecutive samples when taking sample_count samples.

    A sample_count of 0 gives infinity rather than raising.
    """
    with np.errstate(divide='ignore'):
        return float(np.float64(1.0) / sample_count)


def _as_parameter(t):
    """Convert t to an array, adding a trailing axis for arrays of parameters."""
    t = np.asarray(t, dtype=float)
    if t.ndim:
        t = t[..., np.newaxis]
    return t


def _frozen(point):
    """Copy point into a read-only float array."""
    point = np.array(point, dtype=float)
    point.setflags(write=False)
    return point


def _resolve_sample_count(sample_count, out):
    """
    Validate a sample count against an optional output sink.

    Raises
    ------
    ValueError
        If sample_count is below 2 or a fixed-size buffer is too small

    """
    if sample_count is None:
        if not isinstance(out, np.ndarray):
            raise ValueError("sample_count is required unless writing into a fixed-size buffer")
        sample_count = len(out)

    if sample_count < 2:
        raise ValueError(f"sample_count must be at least 2, got {sample_count}")

    if isinstance(out, np.ndarray) and len(out) < sample_count:
        raise ValueError(
            f"Result buffer is not large enough "
            f"(capacity: {len(out)}, sample_count: {sample_count})"
        )

    return sample_count


class QuadraticBezierCurve:
    """
    Represent a quadratic Bezier curve defined by start, control and end points.

    Pure value type: the points are copied into read-only arrays on
    construction and never change afterwards.
    """

    __slots__ = ('_start', '_control', '_end')

    get_point = staticmethod(get_point)
    segment_length = staticmethod(segment_length)

    def __init__(self, start, control, end):
        """
        Initialize curve from its three points.

        Args:
            start: Start point [x, y, z]
            control: Control point [x, y, z]
            end: End point [x, y, z]

        """
        self._start = _frozen(start)
        self._control = _frozen(control)
        self._end = _frozen(end)

    @classmethod
    def from_dict(cls, curve_dict):
        """Build a curve from a dictionary with 'start', 'control' and 'end' keys."""
        return cls(curve_dict['start'], curve_dict['control'], curve_dict['end'])

    @property
    def start(self):
        """Position of the curve starting point."""
        return self._start

    @property
    def control(self):
        """Position of the curve control point."""
        return self._control

    @property
    def end(self):
        """Position of the curve ending point."""
        return self._end

    def point_at(self, t):
        """
        Get point along the curve at parameter t.

        Args:
            t: Parameter value (0 = start, 1 = end), or a 1D array of them

        Returns
        -------
        np.ndarray
            Point at parameter t

        """
        return get_point(self._start, self._control, self._end, t)

    def derivative_at(self, t):
        """Calculate the (unnormalized) tangent vector dB/dt at parameter t."""
        t = _as_parameter(t)
        return 2.0 * (1.0 - t) * (self._control - self._start) + 2.0 * t * (self._end - self._control)

    def sample_points(self, sample_count=None, out=None):
        """
        Get multiple uniformly spaced points along the curve.

        Samples are taken at ``segment_length(sample_count) * i`` for i in
        [0, sample_count), so the end point itself is never included.

        Args:
            sample_count : int, optional
                Number of points to generate. Defaults to len(out) when
                out is a numpy buffer.
            out : np.ndarray or list, optional
                Fixed-size buffer of shape (capacity, 3) to write rows into,
                or a list to clear and append to

        Returns
        -------
        np.ndarray or list
            out when given, otherwise a new (sample_count, 3) array

        Raises
        ------
        ValueError
            If sample_count < 2 or out is a buffer smaller than sample_count.
            Nothing is written in that case.

        """
        sample_count = _resolve_sample_count(sample_count, out)
        points = self._uniform_points(sample_count)

        if out is None:
            return points

        if isinstance(out, np.ndarray):
            out[:sample_count] = points
            return out

        out.clear()
        out.extend(points)
        return out

    def sample_rays(self, sample_count=None, out=None):
        """
        Get multiple points along the curve as rays pointing to the next one.

        Args:
            sample_count : int, optional
                Number of rays to generate. Defaults to len(out) when out
                is a numpy buffer.
            out : np.ndarray or list, optional
                Fixed-size buffer of shape (capacity, 2, 3) receiving origins
                in [:, 0] and directions in [:, 1], or a list to clear and
                append Ray objects to

        Returns
        -------
        list or np.ndarray
            out when given, otherwise a new list of Ray

        Raises
        ------
        ValueError
            If sample_count < 2 or out is a buffer smaller than sample_count

        """
        sample_count = _resolve_sample_count(sample_count, out)
        origins = self._uniform_points(sample_count)

        directions = np.empty_like(origins)
        directions[:-1] = origins[1:] - origins[:-1]
        # No next sample for the last point: reuse the direction before it.
        directions[-1] = directions[-2]

        if isinstance(out, np.ndarray):
            out[:sample_count, 0] = origins
            out[:sample_count, 1] = directions
            return out

        rays = [Ray(origin, direction) for origin, direction in zip(origins, directions)]
        if out is None:
            return rays

        out.clear()
        out.extend(rays)
        return out

    def estimate_length(self, sample_count=3):
        """
        Estimate curve length by summing straight segments between samples.

        The walk starts at the start point, visits every uniform sample and
        closes with a segment from the last sample to the end point.

        Note: sample_count is not range checked. Zero or negative values
        skip the walk and return the straight start-to-end distance.
        """
        length = 0.0
        step = segment_length(sample_count)
        previous_point = self._start

        for i in range(sample_count):
            current_point = self.point_at(step * i)
            length += float(np.linalg.norm(current_point - previous_point))
            previous_point = current_point

        length += float(np.linalg.norm(self._end - previous_point))

        return length

    def arc_length(self, t0=0.0, t1=1.0):
        """
        Integrate the curve length between two parameter values.

        Args:
            t0 : float, optional
                Lower parameter bound (default is 0.0)
            t1 : float, optional
                Upper parameter bound (default is 1.0)

        Returns
        -------
        float
            Length of the curve between t0 and t1

        """
        length, _ = integrate.quad(
            lambda t: np.linalg.norm(self.derivative_at(t)), t0, t1
        )
        return float(length)

    def split(self, t):
        """
        Split the curve into two at parameter t (de Casteljau subdivision).

        Returns
        -------
        tuple
            (first, second) curves meeting at point_at(t)

        """
        q0 = lerp(self._start, self._control, t)
        q1 = lerp(self._control, self._end, t)
        b = lerp(q0, q1, t)
        return (
            QuadraticBezierCurve(self._start, q0, b),
            QuadraticBezierCurve(b, q1, self._end),
        )

    def to_dict(self):
        """Convert curve to dictionary for JSON export."""
        return {
            'start': self._start.tolist(),
            'control': self._control.tolist(),
            'end': self._end.tolist(),
        }

    def _uniform_points(self, sample_count):
        """Evaluate the curve at the uniform sample parameters."""
        t = segment_length(sample_count) * np.arange(sample_count)
        return self.point_at(t)

    def __eq__(self, other):
        """Compare the three points exactly."""
        if not isinstance(other, QuadraticBezierCurve):
            return NotImplemented
        return (np.array_equal(self._start, other._start)
                and np.array_equal(self._control, other._control)
                and np.array_equal(self._end, other._end))

    def __hash__(self):
        """Hash the three points."""
        return hash((tuple(self._start.tolist()),
                     tuple(self._control.tolist()),
                     tuple(self._end.tolist())))

    def __repr__(self):
        """Return string representation of curve."""
        return (f"QuadraticBezierCurve(start={self._start.tolist()}, "
                f"control={self._control.tolist()}, end={self._end.tolist()})")
