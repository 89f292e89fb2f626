import logging

import pytest
from gameframe.behavioral.observer.creature_observers import (
    CombatEventKind, CombatLogger, CombatRecorder, CreatureObserver, ObserverRegistry,
)
from gameframe.domain.creature import Creature


class Tally(CreatureObserver):
    def __init__(self, label, journal):
        self.label = label
        self.journal = journal

    def on_creature_hit(self, creature, action, damage_taken, damage_mitigated):
        self.journal.append(self.label)


class SelfDetaching(CreatureObserver):
    def __init__(self, creature):
        self.creature = creature
        self.calls = 0

    def on_creature_hit(self, creature, action, damage_taken, damage_mitigated):
        self.calls += 1
        self.creature.detach(self)


class Evicting(CreatureObserver):
    def __init__(self, creature, victim):
        self.creature = creature
        self.victim = victim

    def on_creature_hit(self, creature, action, damage_taken, damage_mitigated):
        self.creature.detach(self.victim)


@pytest.mark.unit
def test_attach_is_idempotent_by_identity():
    registry = ObserverRegistry()
    recorder = CombatRecorder()
    registry.attach(recorder)
    registry.attach(recorder)
    registry.attach(None)
    assert len(registry) == 1 and recorder in registry


@pytest.mark.unit
def test_detach_unknown_observer_is_a_no_op():
    registry = ObserverRegistry()
    registry.detach(CombatRecorder())
    registry.detach(None)
    assert len(registry) == 0


@pytest.mark.unit
def test_notifications_follow_attachment_order():
    creature = Creature("Target", 100)
    journal = []
    creature.attach(Tally("first", journal))
    creature.attach(Tally("second", journal))
    creature.take_damage(5)
    assert journal == ["first", "second"]


@pytest.mark.unit
def test_observer_may_detach_itself_during_dispatch():
    creature = Creature("Target", 100)
    observer = SelfDetaching(creature)
    recorder = CombatRecorder()
    creature.attach(observer)
    creature.attach(recorder)
    creature.take_damage(5)
    creature.take_damage(5)
    assert observer.calls == 1
    assert len(recorder.of_kind(CombatEventKind.HIT)) == 2


@pytest.mark.unit
def test_base_observer_callbacks_are_no_ops():
    creature = Creature("Target", 10)
    creature.attach(CreatureObserver())
    creature.take_damage(50)
    assert not creature.is_alive


@pytest.mark.unit
def test_combat_logger_writes_original_message_shapes(caplog):
    attacker = Creature("Bob", 100)
    target = Creature("Alice", 10)
    combat_log = CombatLogger(logging.getLogger("gameframe.test.combat"))
    with caplog.at_level(logging.INFO, logger="gameframe.test.combat"):
        combat_log.on_damage_done(attacker, "Attack", target, 12)
        combat_log.on_creature_hit(target, "Attack", 10, 2)
        combat_log.on_creature_died(target)
    assert caplog.messages == [
        f"[Damage Done] Bob-CreatureId: {attacker.id}, Action: Attack, Target: Alice, Damage: 12",
        f"[Damage Taken] Alice-CreatureId: {target.id}, Action: Attack, Damage: 10 (Damage mitigated: 2)",
        f"[Death] Alice-CreatureId: {target.id} has died!",
    ]


@pytest.mark.unit
def test_combat_logger_mirrors_to_file(tmp_path):
    path = tmp_path / "combat.log"
    creature = Creature("Alice", 10)
    combat_log = CombatLogger(logging.getLogger("gameframe.test.file"), log_file=str(path))
    creature.attach(combat_log)
    creature.take_damage(50)
    combat_log.close()
    content = path.read_text(encoding="utf-8")
    assert "[Damage Taken] Alice" in content and "has died!" in content


@pytest.mark.unit
def test_observer_detached_mid_dispatch_is_skipped():
    creature = Creature("Target", 100)
    recorder = CombatRecorder()
    creature.attach(Evicting(creature, recorder))
    creature.attach(recorder)
    creature.take_damage(5)
    assert recorder.events == []
    assert recorder not in creature.observers


@pytest.mark.unit
def test_file_backed_loggers_keep_their_own_events(tmp_path):
    first_path, second_path = tmp_path / "a.log", tmp_path / "b.log"
    first, second = Creature("OnlyX", 100), Creature("OnlyY", 100)
    first_log = CombatLogger(log_file=str(first_path))
    second_log = CombatLogger(log_file=str(second_path))
    first.attach(first_log)
    second.attach(second_log)
    first.take_damage(5)
    second.take_damage(7)
    first_log.close()
    second_log.close()
    first_content = first_path.read_text(encoding="utf-8")
    second_content = second_path.read_text(encoding="utf-8")
    assert "OnlyX" in first_content and "OnlyY" not in first_content
    assert "OnlyY" in second_content and "OnlyX" not in second_content


@pytest.mark.unit
def test_file_backed_logger_leaves_the_given_logger_level_alone(tmp_path):
    shared = logging.getLogger("gameframe.test.level")
    shared.setLevel(logging.NOTSET)
    combat_log = CombatLogger(shared, log_file=str(tmp_path / "combat.log"))
    assert shared.level == logging.NOTSET
    combat_log.close()
    assert shared.level == logging.NOTSET
    assert combat_log.log.level == logging.NOTSET and not combat_log.log.handlers


@pytest.mark.unit
def test_file_backed_logger_still_propagates_to_the_given_logger(tmp_path, caplog):
    combat_log = CombatLogger(logging.getLogger("gameframe.test.propagate"), log_file=str(tmp_path / "c.log"))
    with caplog.at_level(logging.INFO, logger="gameframe.test.propagate"):
        combat_log.on_creature_died(Creature("Alice", 10))
    combat_log.close()
    assert any("has died!" in message for message in caplog.messages)
