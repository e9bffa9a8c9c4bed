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
Resistor pre-processing for a single light query.

determine_near_resistors() drops resistors that cannot cast a shadow inside
the light radius, and build_segments() flattens the remaining ones into edges
expressed relative to the light.
"""

from typing import Iterable, List

from shapely.geometry import Point as ShapelyPoint

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from light2d_shapely.core.constants import SEGMENT_EXPAND_FACTOR
    from light2d_shapely.core.geometry import Segment
    from light2d_shapely.core.scene_objs.light_source import LightSource
    from light2d_shapely.core.scene_objs.resistor import LightResistor
else:
    from .constants import SEGMENT_EXPAND_FACTOR
    from .geometry import Segment
    from .scene_objs.light_source import LightSource
    from .scene_objs.resistor import LightResistor


def determine_near_resistors(resistors: Iterable[LightResistor],
                             source: LightSource) -> List[LightResistor]:
    """
    Select the resistors that can make a shadow within the light radius.

    The test works on bounding boxes and may keep resistors that turn out to
    be out of reach; it never drops one that is in reach.

    1. dist = distance from the box's top-left corner to the light,
       d = box diagonal. If dist - d > intensity the box is out of reach.
    2. If dist <= intensity the resistor is kept straight away.
    3. Otherwise it is kept if any other corner is within reach.
    4. Finally the exact box-to-light distance catches lights inside a large
       box and circles crossing a box side between two corners.

    Args:
        resistors: Candidate resistors.
        source: The light.

    Returns:
        Resistors in their original order.
    """
    result = []
    light_point = None

    for resistor in resistors:
        bbox = resistor.get_bounding_box()
        if bbox is None:
            continue

        diagonal = bbox.diagonal()
        distance = Segment.length_between(bbox.left, bbox.top, source.x, source.y)

        if distance - diagonal > source.intensity:
            # far away from the light
            continue

        if distance <= source.intensity:
            result.append(resistor)
            continue

        _, top_right, bottom_right, bottom_left = bbox.corners()
        if any(Segment.length_between(p.x, p.y, source.x, source.y) <= source.intensity
               for p in (top_right, bottom_right, bottom_left)):
            result.append(resistor)
            continue

        if light_point is None:
            light_point = ShapelyPoint(source.x, source.y)
        if bbox.to_shapely().distance(light_point) <= source.intensity:
            result.append(resistor)

    return result


def build_segments(source: LightSource, resistors: Iterable[LightResistor],
                   expand_factor: float = SEGMENT_EXPAND_FACTOR) -> List[Segment]:
    """
    Flatten resistors into edges relative to the light.

    Every edge is translated so that the light sits at the origin and then
    grown by expand_factor along its own direction. The growth makes edges
    that should meet at a vertex overlap a little, so no ray leaks through
    the seam.

    Args:
        source: The light.
        resistors: Resistors to flatten (usually the near ones).
        expand_factor: Relative growth of each edge; 0 keeps edges as they are.

    Returns:
        List of segments in resistor order, each resistor in winding order.
    """
    segments = []
    for resistor in resistors:
        for edge in resistor.edges():
            relocated = edge.translate(-source.x, -source.y)
            if expand_factor:
                relocated = relocated.resize(expand_factor)
            segments.append(relocated)
    return segments
