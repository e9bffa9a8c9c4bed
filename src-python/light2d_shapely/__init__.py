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

Light2D Shapely
===============

2D lights and shadows: computes the area lit by a point light among opaque
polygons ("light resistors"), using Shapely for the geometry glue.

Main modules:
- core: Geometry primitives, scene, viewport, sweep and lighting algorithm
- examples: Example scenes and demonstrations
- developer_tests: Feature verification tests

Quick start:
    from light2d_shapely import Scene, LightResistor, SweepLightAlgorithm

    scene = Scene()
    scene.add_occluder(LightResistor([(340, 220), (340, 200), (300, 200), (300, 220)]))
    polygon = SweepLightAlgorithm(scene).compute_visibility_polygon((320, 240), 300)
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.scene import Scene
from .core.scene_objs import LightResistor, LightSource
from .core.light_algorithm import SweepLightAlgorithm
from .core.visibility_polygon import VisibilityPolygon

__all__ = [
    'Scene',
    'LightResistor',
    'LightSource',
    'SweepLightAlgorithm',
    'VisibilityPolygon',
    '__version__',
]
