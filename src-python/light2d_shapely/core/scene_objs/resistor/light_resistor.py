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

import math
import uuid as uuid_module
from typing import Any, Iterable, Iterator, List, Optional, Tuple

import numpy as np
from shapely.geometry import LineString, Point as ShapelyPoint, Polygon

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from light2d_shapely.core.geometry import geometry, Box2, Point, Segment
else:
    from ...geometry import geometry, Box2, Point, Segment


class LightResistor:
    """
    Opaque polygon that blocks light.

    The vertices are kept in insertion order, which defines the winding of the
    edges. With three or more vertices the polygon is closed by an edge from
    the last vertex back to the first; with two it is a single edge and with
    one it casts no shadow at all. Self-intersection is not checked.

    The bounding box is cached. Every method that changes the vertex list
    resets the cache to None and get_bounding_box() rebuilds it on the next
    call, so vertices must only be changed through these methods.

    Attributes:
        name (str or None): Optional label (used by the SVG renderer).
        uuid (str): Unique identifier for this resistor.
    """

    type = 'LightResistor'

    def __init__(self, vertices: Optional[Iterable[Any]] = None, name: Optional[str] = None):
        """
        Args:
            vertices: Optional initial vertices. Each may be a Point, an
                (x, y) pair or a {'x': ..., 'y': ...} dictionary.
            name: Optional display name.
        """
        self._vertices: List[Point] = []
        self._bbox: Optional[Box2] = None
        self.name = name
        self.uuid: str = str(uuid_module.uuid4())
        if vertices is not None:
            self.add_vertices(vertices)

    @staticmethod
    def _validated(vertex: Any) -> Point:
        point = geometry.as_point(vertex)
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise ValueError(f"Resistor vertex coordinates must be finite, got {point}")
        return point

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """Read-only view of the vertices."""
        return tuple(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def add_vertex(self, vertex: Any) -> None:
        self._vertices.append(self._validated(vertex))
        self._bbox = None

    def add_vertices(self, vertices: Iterable[Any]) -> None:
        # validate everything first so a bad vertex leaves the resistor untouched
        points = [self._validated(v) for v in vertices]
        self._vertices.extend(points)
        self._bbox = None

    def set_vertices(self, vertices: Iterable[Any]) -> None:
        points = [self._validated(v) for v in vertices]
        self._vertices = points
        self._bbox = None

    def clear(self) -> None:
        self._vertices = []
        self._bbox = None

    def _calculate_bbox(self) -> Optional[Box2]:
        if not self._vertices:
            return None
        coords = np.array([(p.x, p.y) for p in self._vertices], dtype=float)
        x_min, y_min = coords.min(axis=0)
        x_max, y_max = coords.max(axis=0)
        return Box2(float(x_min), float(y_max), float(x_max), float(y_min))

    def get_bounding_box(self) -> Optional[Box2]:
        """
        Bounding box of the vertices, or None for an empty resistor.
        """
        if self._bbox is None:
            self._bbox = self._calculate_bbox()
        return self._bbox

    def edges(self) -> Iterator[Segment]:
        """
        Yield the boundary edges in winding order.

        The closing edge (last vertex back to first) is only produced when
        there are at least three vertices.
        """
        count = len(self._vertices)
        if count < 2:
            return
        last = count if count >= 3 else count - 1
        for i in range(last):
            yield Segment.from_points(self._vertices[i], self._vertices[(i + 1) % count])

    def to_shapely(self):
        """
        Convert to a Shapely geometry: Polygon for 3+ vertices, LineString
        for 2, Point for 1 and None when empty.
        """
        coords = [(p.x, p.y) for p in self._vertices]
        if len(coords) >= 3:
            return Polygon(coords)
        if len(coords) == 2:
            return LineString(coords)
        if len(coords) == 1:
            return ShapelyPoint(coords[0])
        return None

    def __repr__(self) -> str:
        label = f"name={self.name!r}, " if self.name else ""
        return f"LightResistor({label}vertices={len(self._vertices)})"


# Example usage and testing
if __name__ == "__main__":
    resistor = LightResistor([(2, 2), (2, 6), (-2, 6), (-2, 2)], name='square')
    print(resistor)
    print(f"  Bounding box: {resistor.get_bounding_box()}")
    print(f"  Diagonal: {resistor.get_bounding_box().diagonal():.3f}")

    resistor.add_vertex((0, 10))
    print(f"  After add_vertex: {resistor.get_bounding_box()}")
    for edge in resistor.edges():
        print(f"    {edge}")
