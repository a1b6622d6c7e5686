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

import pytest

from quadratic_bezier import QuadraticBezierCurve


@pytest.fixture
def arch_curve():
    return QuadraticBezierCurve((0, 0, 0), (1, 2, 0), (2, 0, 0))


@pytest.fixture
def straight_curve():
    # control point at the midpoint makes the curve a uniformly parametrized line
    return QuadraticBezierCurve((0, 0, 0), (1.5, 0, 0), (3, 0, 0))


@pytest.fixture
def degenerate_curve():
    return QuadraticBezierCurve((1, 2, 3), (1, 2, 3), (1, 2, 3))
