from typing import Dict, List

from alibigen.config import ScenarioSettings
from alibigen.scenarios.base import ScenarioPack
from alibigen.scenarios.bomb_duo import BombDuoPack
from alibigen.scenarios.lovers import LoversPack
from alibigen.scenarios.phantom import PhantomPack
from alibigen.scenarios.poison import PoisonPack


class ScenarioRegistry:
    def __init__(self):
        self._packs: Dict[str, ScenarioPack] = {}
        self.register(PhantomPack())
        self.register(LoversPack())
        self.register(PoisonPack())
        self.register(BombDuoPack())

    def register(self, pack: ScenarioPack):
        self._packs[pack.name] = pack

    def get(self, name: str) -> ScenarioPack:
        if name not in self._packs:
            raise ValueError(f"Scenario '{name}' not found.")
        return self._packs[name]

    def list_scenarios(self) -> List[str]:
        return list(self._packs.keys())

    def enabled(self, settings: ScenarioSettings) -> List[ScenarioPack]:
        """Packs switched on in `settings`, in compile order."""
        return [self.get(name) for name in settings.enabled()]
