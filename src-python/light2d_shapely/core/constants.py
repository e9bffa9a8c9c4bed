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
Constants used throughout the lighting algorithms.

Kept in a separate module so the geometry primitives, the viewport builder
and the sweep can share them without circular imports.
"""

# Default number of fill rays around a light with no resistance
DEFAULT_PARTS_NUM = 32

# Angular offset (degrees) of the rays cast on both sides of a visible
# resistor vertex. Produces a sharp shadow edge at the vertex.
ANGLE_EPSILON = 0.01

# Relative growth applied to every resistor edge before the sweep so that
# edges meant to be flush still overlap despite floating point error
SEGMENT_EXPAND_FACTOR = 0.01

# Relative amount trimmed from both ends of a sight line. A vertex is
# not hidden by the edges that end on it, and a light sitting on an edge is
# not hidden by that edge.
SIGHT_SHRINK = 1e-6

# Below this cross product two segments are treated as parallel
PARALLEL_EPSILON = 1e-12
