from __future__ import annotations

import logging
from abc import ABC
from dataclasses import dataclass
from enum import Enum, auto
from itertools import count
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

if TYPE_CHECKING:
    from gameframe.domain.creature import Attackable, Creature

__all__ = [
    "CreatureObserver",
    "ObserverRegistry",
    "CombatEventKind",
    "CombatEvent",
    "CombatRecorder",
    "CombatLogger",
]

logger = logging.getLogger(__name__)

_file_sink_ids = count(1)

# ==========================
# Module: creature_observers
# Purpose: Observer pattern for combat events. Each creature owns a registry of
#          listeners; fan-out is synchronous and follows attachment order.
# ==========================


class CreatureObserver(ABC):
    """
    Listener for combat events raised by a creature.

    All callbacks default to no-ops so concrete observers override only what
    they care about.
    """

    def on_damage_done(self, attacker: "Creature", action: str, target: "Attackable", damage: int) -> None:
        """
        Raised on the attacker's observers right before the target takes damage.

        :param attacker: Creature performing the action.
        :param action: Action label (e.g. "Attack").
        :param target: The attacked object.
        :param damage: Final damage after strategy and modifier.
        """
        return None

    def on_creature_hit(self, creature: "Creature", action: str, damage_taken: int, damage_mitigated: int) -> None:
        """
        Raised on the target's observers before its health changes.

        :param creature: Creature being hit.
        :param action: Action label.
        :param damage_taken: Damage that gets through armor.
        :param damage_mitigated: Damage absorbed by armor.
        """
        return None

    def on_creature_died(self, creature: "Creature") -> None:
        """
        Raised once when the creature's HP drops from positive to zero.

        :param creature: The creature that died.
        """
        return None


class ObserverRegistry:
    """
    Identity-unique, ordered set of observers with typed fan-out helpers.
    """

    def __init__(self) -> None:
        self._observers: List[CreatureObserver] = []

    def __contains__(self, observer: object) -> bool:
        return any(existing is observer for existing in self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def attach(self, observer: Optional[CreatureObserver]) -> None:
        """
        Registers an observer; ``None`` and already-attached observers are ignored.

        :param observer: Listener to attach.
        """
        if observer is None or observer in self:
            return
        self._observers.append(observer)

    def detach(self, observer: Optional[CreatureObserver]) -> None:
        """
        Unregisters an observer if present (idempotent).

        :param observer: Listener to detach.
        """
        self._observers = [existing for existing in self._observers if existing is not observer]

    def snapshot(self) -> Tuple[CreatureObserver, ...]:
        """
        :return: Currently attached observers in attachment order.
        """
        return tuple(self._observers)

    def _live(self):
        # Snapshot for safe mutation; skip anything detached earlier in this round.
        for observer in self.snapshot():
            if observer in self:
                yield observer

    def notify_damage_done(self, attacker: "Creature", action: str, target: "Attackable", damage: int) -> None:
        for observer in self._live():
            observer.on_damage_done(attacker, action, target, damage)

    def notify_hit(self, creature: "Creature", action: str, damage_taken: int, damage_mitigated: int) -> None:
        for observer in self._live():
            observer.on_creature_hit(creature, action, damage_taken, damage_mitigated)

    def notify_died(self, creature: "Creature") -> None:
        for observer in self._live():
            observer.on_creature_died(creature)


class CombatEventKind(Enum):
    """Kinds of events a :class:`CombatRecorder` captures."""
    DAMAGE_DONE = auto()
    HIT = auto()
    DIED = auto()


@dataclass(frozen=True, slots=True)
class CombatEvent:
    """
    One recorded combat notification.

    :param kind: Which callback fired.
    :param subject: Attacker for DAMAGE_DONE; the hit/dead creature otherwise.
    :param action: Action label ("" for DIED).
    :param target: The attacked object (DAMAGE_DONE only).
    :param amount: Damage dealt or taken (0 for DIED).
    :param mitigated: Damage absorbed (HIT only).
    """
    kind: CombatEventKind
    subject: Any
    action: str = ""
    target: Any = None
    amount: int = 0
    mitigated: int = 0


class CombatRecorder(CreatureObserver):
    """
    In-memory observer keeping every notification in arrival order.

    Handy for replays and for asserting on combat flow.
    """

    def __init__(self) -> None:
        self.events: List[CombatEvent] = []

    def on_damage_done(self, attacker: "Creature", action: str, target: "Attackable", damage: int) -> None:
        self.events.append(CombatEvent(CombatEventKind.DAMAGE_DONE, attacker, action, target, damage))

    def on_creature_hit(self, creature: "Creature", action: str, damage_taken: int, damage_mitigated: int) -> None:
        self.events.append(CombatEvent(CombatEventKind.HIT, creature, action, None, damage_taken, damage_mitigated))

    def on_creature_died(self, creature: "Creature") -> None:
        self.events.append(CombatEvent(CombatEventKind.DIED, creature))

    def of_kind(self, kind: CombatEventKind) -> List[CombatEvent]:
        """
        :param kind: Event kind to filter by.
        :return: Recorded events of that kind, in order.
        """
        return [event for event in self.events if event.kind is kind]

    def clear(self) -> None:
        self.events.clear()


def _display_name(obj: Any) -> str:
    name = getattr(obj, "name", None)
    if name is None:
        return type(obj).__name__
    return name or "Unknown"


class CombatLogger(CreatureObserver):
    """
    Observer writing combat events to a standard-library logger at INFO.

    Constructed by the host and attached to each creature it should follow;
    there is no shared instance. With ``log_file`` the events go through a
    child logger owned by this instance, so two file-backed loggers never
    see each other's events while records still propagate to ``log``.

    :param log: Logger to write to (defaults to ``gameframe.combat``).
    :param log_file: Optional path mirroring this instance's events only.
    """

    def __init__(self, log: Optional[logging.Logger] = None, log_file: Optional[str] = None) -> None:
        self._log = log or logging.getLogger("gameframe.combat")
        self._file_handler: Optional[logging.FileHandler] = None
        if log_file:
            self._log = self._log.getChild(f"file{next(_file_sink_ids)}")
            self._log.setLevel(logging.INFO)
            self._file_handler = logging.FileHandler(log_file, encoding="utf-8")
            self._file_handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
            self._log.addHandler(self._file_handler)
            logger.debug("Combat log file opened: %s", log_file)

    @property
    def log(self) -> logging.Logger:
        return self._log

    def close(self) -> None:
        """
        Detaches and closes the combat log file handler, if one was opened.
        """
        if self._file_handler is None:
            return
        self._log.removeHandler(self._file_handler)
        self._log.setLevel(logging.NOTSET)
        self._file_handler.close()
        self._file_handler = None

    def on_damage_done(self, attacker: "Creature", action: str, target: "Attackable", damage: int) -> None:
        self._log.info("[Damage Done] %s-CreatureId: %d, Action: %s, Target: %s, Damage: %d",
                       _display_name(attacker), attacker.id, action or "Unknown", _display_name(target), damage)

    def on_creature_hit(self, creature: "Creature", action: str, damage_taken: int, damage_mitigated: int) -> None:
        self._log.info("[Damage Taken] %s-CreatureId: %d, Action: %s, Damage: %d (Damage mitigated: %d)",
                       _display_name(creature), creature.id, action or "Unknown", damage_taken, damage_mitigated)

    def on_creature_died(self, creature: "Creature") -> None:
        self._log.info("[Death] %s-CreatureId: %d has died!", _display_name(creature), creature.id)
