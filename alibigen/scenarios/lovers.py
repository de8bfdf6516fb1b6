from typing import Tuple

from alibigen.config import PuzzleConfig
from alibigen.core.errors import ConfigurationError
from alibigen.encodings import exactly_one
from alibigen.scenarios.base import RoleVars, ScenarioFacts, ScenarioPack, ValueFn, first_true


class LoversFacts(ScenarioFacts):
    lovers: Tuple[str, str]


class LoversPack(ScenarioPack):
    """
    Two distinct lovers who are never in the same room.
    Every other pair of characters meets at least once; when the phantom
    scenario is active the phantom is neither a lover nor obliged to meet anyone.
    """
    min_chars = 2

    @property
    def name(self) -> str:
        return "lovers"

    def validate(self, config: PuzzleConfig) -> None:
        super().validate(config)
        if config.scenarios.phantom and len(config.chars) < 3:
            raise ConfigurationError(
                f"Scenarios 'lovers' and 'phantom' together require at least 3 characters, got {len(config.chars)}"
            )

    def compile(self, ctx) -> RoleVars:
        C, R, T = len(ctx.chars), len(ctx.rooms), ctx.T
        l1 = ctx.role_vars("L1")
        l2 = ctx.role_vars("L2")
        ctx.extend(exactly_one(l1))
        ctx.extend(exactly_one(l2))
        for ci in range(C):
            ctx.add([-l1[ci], -l2[ci]])

        ph = ctx.roles.get("phantom", {}).get("PH")
        if ph:
            for ci in range(C):
                ctx.add([-ph[ci], -l1[ci]])
                ctx.add([-ph[ci], -l2[ci]])

        # Lovers never meet
        for t in range(T):
            for ri in range(R):
                for c1 in range(C):
                    for c2 in range(C):
                        if c1 == c2:
                            continue
                        ctx.add([-l1[c1], -l2[c2], -ctx.x(c1, t, ri), -ctx.x(c2, t, ri)])

        # Every pair other than the lovers themselves meets at least once
        for ci in range(C):
            for cj in range(ci + 1, C):
                meets = [ctx.together(ci, cj, t, ri) for t in range(T) for ri in range(R)]
                if ph:
                    meets += [ph[ci], ph[cj]]
                ctx.add([l1[ci], l2[ci], l1[cj], l2[cj]] + meets)
                ctx.add([-l1[ci], l2[cj]] + meets)
                ctx.add([-l2[ci], l1[cj]] + meets)
                ctx.add([-l1[cj], l2[ci]] + meets)
                ctx.add([-l2[cj], l1[ci]] + meets)

        return {"L1": l1, "L2": l2}

    def decode(self, config: PuzzleConfig, roles: RoleVars, value: ValueFn) -> LoversFacts:
        return LoversFacts(lovers=(
            first_true(config.chars, roles["L1"], value, "first lover"),
            first_true(config.chars, roles["L2"], value, "second lover"),
        ))
