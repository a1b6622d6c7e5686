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

"""Quadratic Bezier curves in 3D space - evaluation, sampling and subdivision."""

from .curve import QuadraticBezierCurve, get_point, lerp, segment_length
from .ray import Ray

__all__ = [
    'QuadraticBezierCurve',
    'Ray',
    'get_point',
    'lerp',
    'segment_length',
]
