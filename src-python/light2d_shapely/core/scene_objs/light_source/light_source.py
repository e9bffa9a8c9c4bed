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

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from light2d_shapely.core.geometry import Point
else:
    from ...geometry import Point


class LightSource:
    """
    Point light with a limited range.

    Light sources are cheap value objects built for a single visibility query.

    Attributes:
        x: The x-coordinate of the light.
        y: The y-coordinate of the light.
        intensity: Radius of effect. Nothing farther than this from the
            light is lit.
    """

    type = 'LightSource'

    def __init__(self, x: float, y: float, intensity: float):
        """
        Raises:
            ValueError: If the position is not finite or the intensity is not
                a finite positive number.
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Light position must be finite, got ({x}, {y})")
        if not math.isfinite(intensity) or intensity <= 0:
            raise ValueError(f"Light intensity must be a finite positive number, got {intensity}")
        self.x = float(x)
        self.y = float(y)
        self.intensity = float(intensity)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def to_shapely(self):
        """Disc of light as a Shapely polygon (buffered point)."""
        return self.position.to_shapely().buffer(self.intensity)

    def __repr__(self) -> str:
        return f"LightSource(x={self.x}, y={self.y}, intensity={self.intensity})"
