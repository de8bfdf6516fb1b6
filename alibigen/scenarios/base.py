import abc
from typing import Any, Callable, Dict, List, Optional, Sequence

from pydantic import BaseModel

from alibigen.config import PuzzleConfig
from alibigen.core.errors import AlibiError, ConfigurationError

RoleVars = Dict[str, List[int]]
ValueFn = Callable[[int], bool]


class ScenarioFacts(BaseModel):
    """Role bindings of one scenario, read off a satisfying assignment."""
    pass


class ScenarioPack(abc.ABC):
    """
    One narrative rule: role-selection variables plus the clauses linking
    them to occupancy. Packs are independent of the solver and compiler core.
    """
    min_chars: int = 1
    min_rooms: int = 1

    @property
    @abc.abstractmethod
    def name(self) -> str:
        pass

    def validate(self, config: PuzzleConfig) -> None:
        """Structural preconditions, checked before anything is compiled."""
        if len(config.chars) < self.min_chars:
            raise ConfigurationError(
                f"Scenario '{self.name}' requires at least {self.min_chars} characters, got {len(config.chars)}"
            )
        if len(config.rooms) < self.min_rooms:
            raise ConfigurationError(
                f"Scenario '{self.name}' requires at least {self.min_rooms} rooms, got {len(config.rooms)}"
            )

    @abc.abstractmethod
    def compile(self, ctx) -> RoleVars:
        """Emits clauses into ctx and returns the role variables needed at decode time."""
        pass

    @abc.abstractmethod
    def decode(self, config: PuzzleConfig, roles: RoleVars, value: ValueFn) -> ScenarioFacts:
        """Reads the concrete role bindings off a satisfying assignment."""
        pass


def first_true(names: Sequence[Any], vids: Sequence[int], value: ValueFn, role: str) -> Any:
    picked: Optional[Any] = None
    for name, vid in zip(names, vids):
        if value(vid):
            picked = name
            break
    if picked is None:
        raise AlibiError(f"No candidate selected for role '{role}' in the model")
    return picked
