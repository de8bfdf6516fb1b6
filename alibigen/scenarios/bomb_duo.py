from typing import Tuple

from alibigen.config import PuzzleConfig
from alibigen.encodings import define_and, exactly_one
from alibigen.scenarios.base import RoleVars, ScenarioFacts, ScenarioPack, ValueFn, first_true


class BombDuoFacts(ScenarioFacts):
    bomb_duo: Tuple[str, str]


class BombDuoPack(ScenarioPack):
    """
    Two bombers are the only pair ever alone together in a room,
    and they are alone together at least once.
    """
    min_chars = 2

    @property
    def name(self) -> str:
        return "bomb_duo"

    def compile(self, ctx) -> RoleVars:
        C, R, T = len(ctx.chars), len(ctx.rooms), ctx.T
        a1 = ctx.role_vars("A1")
        a2 = ctx.role_vars("A2")
        ctx.extend(exactly_one(a1))
        ctx.extend(exactly_one(a2))
        for ci in range(C):
            ctx.add([-a1[ci], -a2[ci]])

        for ci in range(C):
            for cj in range(ci + 1, C):
                # Either orientation of the two bomber roles
                pair1 = ctx.var("bombPair", ctx.chars[ci], ctx.chars[cj])
                pair2 = ctx.var("bombPair", ctx.chars[cj], ctx.chars[ci])
                ctx.extend(define_and(pair1, [a1[ci], a2[cj]]))
                ctx.extend(define_and(pair2, [a1[cj], a2[ci]]))

                alone = [ctx.alone((ci, cj), t, ri) for t in range(T) for ri in range(R)]
                for p in alone:
                    ctx.add([-p, pair1, pair2])

                ctx.add([-a1[ci], -a2[cj]] + alone)
                ctx.add([-a1[cj], -a2[ci]] + alone)

        return {"A1": a1, "A2": a2}

    def decode(self, config: PuzzleConfig, roles: RoleVars, value: ValueFn) -> BombDuoFacts:
        return BombDuoFacts(bomb_duo=(
            first_true(config.chars, roles["A1"], value, "first bomber"),
            first_true(config.chars, roles["A2"], value, "second bomber"),
        ))
