"""
gameframe: turn-based creature combat built from small, composable patterns.

Strategy (attack algorithms), composite + decorator (armor), observer (combat
events) and factories (equipment kits) meet in :class:`~gameframe.domain.creature.Creature`.
"""

__version__ = "0.1.0"
