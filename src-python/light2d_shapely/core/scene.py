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
import uuid as uuid_module
from typing import List, Optional

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from light2d_shapely.core.constants import DEFAULT_PARTS_NUM
    from light2d_shapely.core.scene_objs.resistor import LightResistor
else:
    from .constants import DEFAULT_PARTS_NUM
    from .scene_objs.resistor import LightResistor


class Scene:
    """
    Container for light resistors and lighting settings.

    The scene is the occluder registry: the host adds and removes resistors
    across frames, and lighting algorithms read it during a query. There is
    no internal locking, so the scene (and its resistors) must not be
    mutated while a query is running.

    Attributes:
        resistors (list): All resistors in the scene
        parts_num (int): Number of fill rays used around a light with no
            resistance (angular resolution is 360 / parts_num degrees)
        error (str or None): Error message if the last query failed
        warning (str or None): Warning message if the last query had warnings
        name (str or None): Optional name for the scene (used in exports)
    """

    def __init__(self):
        """Initialize an empty scene with default settings."""
        self.resistors: List[LightResistor] = []
        self._parts_num = DEFAULT_PARTS_NUM
        self.error = None
        self.warning = None
        self.name = None
        self._uuid: str = str(uuid_module.uuid4())

    @property
    def parts_num(self) -> int:
        """Get the number of fill rays."""
        return self._parts_num

    @parts_num.setter
    def parts_num(self, value: int):
        """Set the number of fill rays with validation."""
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"parts_num must be a positive integer, got {value!r}")
        self._parts_num = value

    def set_sample_resolution(self, parts_num: int) -> None:
        """
        Set the number of parts a light without any resistance is built of.

        Where resistors are in range the light polygon follows their
        geometry instead. Default is 32.

        Args:
            parts_num: Positive integer.

        Raises:
            ValueError: If parts_num is not a positive integer.
        """
        self.parts_num = parts_num

    def get_sample_resolution(self) -> int:
        return self._parts_num

    @property
    def uuid(self) -> str:
        """Unique identifier of this scene, constant for its lifetime."""
        return self._uuid

    def get_display_name(self) -> str:
        """
        Get a display name for the scene.

        Returns the user-defined name if set, otherwise "Scene" plus a short
        UUID suffix.
        """
        if self.name:
            return self.name
        return f"Scene_{self._uuid[:8]}"

    def add_occluder(self, resistor: LightResistor) -> None:
        """
        Register a resistor.

        Args:
            resistor: The resistor to add. It needs at least one vertex; three
                or more are required for a closed shape.

        Raises:
            ValueError: If the resistor is not a LightResistor or has no vertices.
        """
        if not isinstance(resistor, LightResistor):
            raise ValueError(f"Expected a LightResistor, got {type(resistor).__name__}")
        if len(resistor) == 0:
            raise ValueError("A resistor needs at least one vertex")
        if resistor not in self.resistors:
            self.resistors.append(resistor)

    # Same name as the other scene containers use
    add_object = add_occluder

    def remove_occluder(self, resistor: LightResistor) -> None:
        """Remove a resistor. Unknown resistors are ignored."""
        if resistor in self.resistors:
            self.resistors.remove(resistor)

    remove_object = remove_occluder

    def clear(self) -> None:
        """Remove all resistors from the scene."""
        self.resistors.clear()
        self.error = None
        self.warning = None

    def __repr__(self) -> str:
        return (f"Scene(name={self.get_display_name()!r}, resistors={len(self.resistors)}, "
                f"parts_num={self._parts_num})")
