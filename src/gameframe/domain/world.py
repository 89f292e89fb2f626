from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from gameframe.config import GameSettings
    from gameframe.domain.creature import Creature

__all__ = [
    "WorldObject",
    "World",
]

logger = logging.getLogger(__name__)

# ==========================
# Module: world
# Purpose: Placeable world objects and the bounded container that tracks
#          which objects and creatures exist in a match.
# ==========================


class WorldObject:
    """
    Anything that can be placed in a :class:`World`.

    :param name: Display name (empty becomes "Unnamed" when rendered).
    :param removable: Whether the world is allowed to remove this object.
    """

    _ids = itertools.count(1)

    def __init__(self, name: str = "", removable: bool = False) -> None:
        self._id = next(WorldObject._ids)
        self.name = name
        self.x = 0
        self.y = 0
        self.removable = removable

    @property
    def id(self) -> int:
        """
        :return: Process-unique identifier assigned at construction.
        """
        return self._id

    def __str__(self) -> str:
        safe_name = self.name or "Unnamed"
        removable = "Yes" if self.removable else "No"
        return (f"[{type(self).__name__}: {safe_name}] ID: {self.id} - "
                f"Position: ({self.x}, {self.y}) - Removable: {removable}")


class World:
    """
    Bounded 2D space holding world objects and creatures.

    Bounds are informational: nothing here moves objects around, the host
    decides where things are placed.

    :param max_x: Horizontal bound, clamped to >= 0.
    :param max_y: Vertical bound, clamped to >= 0.
    :param name: World name; empty falls back to "Basic World".
    """

    def __init__(self, max_x: int, max_y: int, name: str = "Basic World") -> None:
        self.max_x = max_x
        self.max_y = max_y
        self.name = name or "Basic World"
        self._world_objects: List[WorldObject] = []
        self._creatures: List["Creature"] = []
        logger.debug("World created: %s (MaxX: %d, MaxY: %d)", self.name, self.max_x, self.max_y)

    @classmethod
    def from_settings(cls, settings: "GameSettings") -> "World":
        """
        Builds a world from loaded settings.

        :param settings: Settings carrying bounds and name.
        :return: New, empty world.
        """
        return cls(settings.world_max_x, settings.world_max_y, settings.world_name)

    @property
    def max_x(self) -> int:
        return self._max_x

    @max_x.setter
    def max_x(self, value: int) -> None:
        self._max_x = max(0, value)

    @property
    def max_y(self) -> int:
        return self._max_y

    @max_y.setter
    def max_y(self, value: int) -> None:
        self._max_y = max(0, value)

    def add_world_object(self, world_object: Optional[WorldObject]) -> None:
        """
        Adds a world object; ``None`` is ignored.

        :param world_object: Object to place in the world.
        """
        if world_object is None:
            return
        self._world_objects.append(world_object)
        logger.debug("%s-%s (ID: %d) added to %s",
                     type(world_object).__name__, world_object.name, world_object.id, self.name)

    def remove_world_object(self, world_object: Optional[WorldObject]) -> None:
        """
        Removes a world object, but only when it is flagged removable.

        :param world_object: Object to remove.
        """
        if world_object is None or not world_object.removable:
            return
        if world_object in self._world_objects:
            self._world_objects.remove(world_object)
            logger.debug("%s-%s (ID: %d) removed from %s",
                         type(world_object).__name__, world_object.name, world_object.id, self.name)

    def get_world_objects(self) -> List[WorldObject]:
        """
        :return: Copy of the current world objects.
        """
        return list(self._world_objects)

    def add_creature(self, creature: Optional["Creature"]) -> None:
        if creature is None:
            return
        self._creatures.append(creature)
        logger.debug("Creature %s (ID: %d) added to %s", creature.name, creature.id, self.name)

    def remove_creature(self, creature: Optional["Creature"]) -> None:
        if creature is None or creature not in self._creatures:
            return
        self._creatures.remove(creature)
        logger.debug("Creature %s (ID: %d) removed from %s", creature.name, creature.id, self.name)

    def get_creatures(self) -> List["Creature"]:
        """
        :return: Copy of the current creature roster.
        """
        return list(self._creatures)

    def __str__(self) -> str:
        return f"{{Name={self.name}, MaxX = {self.max_x}, MaxY = {self.max_y}}}"
