"""
Copyright 2026 light2d-shapely authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
The viewport: how the light sees its surroundings.

Every resistor edge is reduced to its two endpoints, each tagged with the
angle at which the light sees it. Sorted by angle they form a one dimensional
axis from -180 to 180 degrees:

                                           ______r3______
        _____r1____                  __r2_|___           |
       |           |                |     |   |          |
 ---------------------------------------------------------------->
 |     |           |           |                                |
-180   a           b           0                               180

Resistor r1 spans the angles a to b. Resistors r2 and r3 overlap, so the
sweep has to decide which edge is in front.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from light2d_shapely.core.errors import InvalidGeometryError
    from light2d_shapely.core.geometry import geometry, Segment
else:
    from .errors import InvalidGeometryError
    from .geometry import geometry, Segment


@dataclass(unsafe_hash=True)
class ViewportPoint:
    """
    A point seen from the light, tagged with its angle.

    Coordinates are relative to the light. For edge endpoints, segment is
    the originating edge and other is the opposite endpoint of that edge.
    Sample rays use the same type with segment and other left as None.

    Equality and hashing use x, y, segment and angle, never other, so two
    identical edges from different resistors produce equal points.
    """
    x: float
    y: float
    segment: Optional[Segment] = None
    angle: float = field(init=False)
    other: Optional['ViewportPoint'] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        self.angle = geometry.vector_angle(self.x, self.y)

    @property
    def distance(self) -> float:
        """Distance from the light."""
        return math.hypot(self.x, self.y)


def build_viewport(segments: Iterable[Segment]) -> List[ViewportPoint]:
    """
    Build the angle-sorted viewport from light-relative segments.

    Each segment contributes two mutually linked points. The sort is stable,
    so points sharing an angle keep their segment order; the sweep does not
    depend on that order.

    Args:
        segments: Edges relative to the light (see build_segments()).

    Returns:
        Viewport points sorted by ascending angle.
    """
    viewport = []
    for segment in segments:
        point1 = ViewportPoint(segment.x1, segment.y1, segment)
        point2 = ViewportPoint(segment.x2, segment.y2, segment)
        point1.other = point2
        point2.other = point1
        viewport.append(point1)
        viewport.append(point2)

    viewport.sort(key=lambda vp: vp.angle)
    return viewport


def _index_viewport(viewport: Iterable[ViewportPoint]) -> Dict[Tuple[Segment, float, float], ViewportPoint]:
    index = {}
    for vp in viewport:
        if vp.segment is not None:
            index.setdefault((vp.segment, vp.x, vp.y), vp)
    return index


def find_start_actions(segments: Iterable[Segment], viewport: List[ViewportPoint],
                       intensity: float) -> List[ViewportPoint]:
    """
    Find the edges that are already open when the sweep starts at -180.

    An edge is open at the start when it crosses the boundary ray from the
    light along the negative x axis: one endpoint has y >= 0, the other
    y < 0, and the edge meets the boundary ray. The crossing may lie beyond
    the light radius, since the same edge can still come within reach at
    other angles. Crossings on the positive x axis do not count; an endpoint
    lying on the negative x axis does.

    The returned entry is the viewport point of the y >= 0 endpoint. The
    other endpoint has a negative angle and is reached first by the sweep,
    which then closes the edge.

    Args:
        segments: The edges the viewport was built from.
        viewport: The sorted viewport.
        intensity: Light radius, the shortest length of the boundary ray.

    Returns:
        Viewport points to seed the active edge set with.

    Raises:
        InvalidGeometryError: If a crossing edge has no viewport entry.
    """
    index = _index_viewport(viewport)
    open_actions = []

    for segment in segments:
        if segment.y1 >= 0:
            upper, lower = (segment.x1, segment.y1), (segment.x2, segment.y2)
        else:
            upper, lower = (segment.x2, segment.y2), (segment.x1, segment.y1)

        if not (upper[1] >= 0 > lower[1]):
            continue

        # reaches past both endpoints, so any crossing on the negative x axis counts
        reach = 2.0 * max(intensity, math.hypot(*upper), math.hypot(*lower))
        if not segment.intersects(Segment(0.0, 0.0, -reach, 0.0)):
            continue

        vp = index.get((segment, upper[0], upper[1]))
        if vp is None:
            raise InvalidGeometryError(
                f"Edge {segment} crosses the sweep start but has no viewport entry; "
                f"resistor geometry changed while the light was being computed?"
            )
        open_actions.append(vp)

    return open_actions
