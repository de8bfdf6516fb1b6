from alibigen.scenarios.base import ScenarioFacts, ScenarioPack
from alibigen.scenarios.bomb_duo import BombDuoFacts, BombDuoPack
from alibigen.scenarios.lovers import LoversFacts, LoversPack
from alibigen.scenarios.phantom import PhantomFacts, PhantomPack
from alibigen.scenarios.poison import PoisonFacts, PoisonPack
from alibigen.scenarios.registry import ScenarioRegistry

__all__ = [
    "ScenarioPack", "ScenarioFacts", "ScenarioRegistry",
    "PhantomPack", "PhantomFacts", "LoversPack", "LoversFacts",
    "PoisonPack", "PoisonFacts", "BombDuoPack", "BombDuoFacts",
]
