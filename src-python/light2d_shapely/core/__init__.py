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

from .geometry import geometry, Geometry, Point, Segment, Box2, Direction
from . import constants
from .errors import InvalidGeometryError
from .scene_objs import LightResistor, LightSource
from .scene import Scene
from .segments import determine_near_resistors, build_segments
from .viewport import ViewportPoint, build_viewport, find_start_actions
from .sweep import ActiveEdgeSet, is_visible, evaluate_candidates, cast_rays
from .visibility_polygon import VisibilityPolygon
from .light_algorithm import LightingAlgorithm, SweepLightAlgorithm
from .svg_renderer import SVGRenderer

__all__ = [
    'geometry', 'Geometry', 'Point', 'Segment', 'Box2', 'Direction',
    'constants',
    'InvalidGeometryError',
    'LightResistor', 'LightSource',
    'Scene',
    'determine_near_resistors', 'build_segments',
    'ViewportPoint', 'build_viewport', 'find_start_actions',
    'ActiveEdgeSet', 'is_visible', 'evaluate_candidates', 'cast_rays',
    'VisibilityPolygon',
    'LightingAlgorithm', 'SweepLightAlgorithm',
    'SVGRenderer'
]
