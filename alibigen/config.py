import dataclasses
import json
import os
from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from alibigen.core.errors import ConfigurationError
from alibigen.core.logging import get_logger
from alibigen.solver.dpll import DEFAULT_TIMEOUT_MS

logger = get_logger("alibigen.config")


class ScenarioSettings(BaseModel):
    """
    Scenario toggles plus their fixed parameters.
    The short s1/s2/s4/s5 names used by saved puzzle configurations are accepted as aliases.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    poison: bool = Field(False, validation_alias=AliasChoices("poison", "s1"))
    poison_room: Optional[str] = Field(None, validation_alias=AliasChoices("poison_room", "s1_room"))
    poison_time: Optional[int] = Field(None, validation_alias=AliasChoices("poison_time", "s1_time"))  # 1-based
    phantom: bool = Field(False, validation_alias=AliasChoices("phantom", "s2"))
    bomb_duo: bool = Field(False, validation_alias=AliasChoices("bomb_duo", "s4"))
    lovers: bool = Field(False, validation_alias=AliasChoices("lovers", "s5"))

    @field_validator("poison_room", "poison_time", mode="before")
    @classmethod
    def blank_is_unset(cls, v: Any) -> Any:
        if v == "" or v is False:
            return None
        return v

    def enabled(self) -> List[str]:
        return [name for name in ("phantom", "lovers", "poison", "bomb_duo") if getattr(self, name)]


class PuzzleConfig(BaseModel):
    """Everything the compiler needs to build one puzzle."""
    model_config = ConfigDict(populate_by_name=True)

    rooms: List[str]
    edges: List[Tuple[str, str]] = Field(default_factory=list)
    chars: List[str]
    T: int = Field(gt=0)
    must_move: bool = Field(False, validation_alias=AliasChoices("must_move", "mustMove"))
    allow_stay: bool = Field(True, validation_alias=AliasChoices("allow_stay", "allowStay"))
    scenarios: ScenarioSettings = Field(default_factory=ScenarioSettings)
    seed: int = 0

    @field_validator("rooms", "chars")
    @classmethod
    def check_unique(cls, v: List[str]) -> List[str]:
        if len(v) != len(set(v)):
            raise ValueError("names must be unique")
        return v

    @field_validator("seed", mode="before")
    @classmethod
    def default_seed(cls, v: Any) -> Any:
        return 0 if v is None or v == "" else v

    @model_validator(mode="after")
    def check_edges(self) -> "PuzzleConfig":
        known = set(self.rooms)
        for a, b in self.edges:
            for end in (a, b):
                if end not in known:
                    raise ValueError(f"edge ({a}, {b}) names unknown room '{end}'")
        return self

    @property
    def include_self(self) -> bool:
        """Staying put is allowed only when permitted and not forbidden outright."""
        return self.allow_stay and not self.must_move

    @classmethod
    def coerce(cls, obj: Union["PuzzleConfig", Mapping[str, Any]]) -> "PuzzleConfig":
        """Accepts a model or a plain mapping; invalid input raises ConfigurationError."""
        if isinstance(obj, cls):
            return obj
        try:
            return cls.model_validate(obj)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid puzzle configuration: {e}") from e


@dataclasses.dataclass
class SolverSettings:
    timeout_ms: float = DEFAULT_TIMEOUT_MS

    @staticmethod
    def from_env_or_file() -> "SolverSettings":
        # 1. Env var
        env_timeout = os.environ.get("ALIBIGEN_TIMEOUT_MS")
        if env_timeout:
            try:
                return SolverSettings(timeout_ms=float(env_timeout))
            except ValueError:
                logger.warning(f"Ignoring non-numeric ALIBIGEN_TIMEOUT_MS={env_timeout!r}")

        # 2. Config file
        config_path = os.environ.get("ALIBIGEN_CONFIG_PATH")
        if config_path and os.path.exists(config_path):
            try:
                with open(config_path, "r") as f:
                    data = json.load(f)
                return SolverSettings(timeout_ms=float(data.get("timeout_ms", DEFAULT_TIMEOUT_MS)))
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Ignoring unreadable solver config {config_path}: {e}")

        # Default
        return SolverSettings()
