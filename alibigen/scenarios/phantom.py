from alibigen.config import PuzzleConfig
from alibigen.encodings import exactly_one
from alibigen.scenarios.base import RoleVars, ScenarioFacts, ScenarioPack, ValueFn, first_true


class PhantomFacts(ScenarioFacts):
    phantom: str


class PhantomPack(ScenarioPack):
    """
    Exactly one phantom, who never shares a room with anyone.
    Every other character shares a room with someone at least once.
    """

    @property
    def name(self) -> str:
        return "phantom"

    def compile(self, ctx) -> RoleVars:
        C, R, T = len(ctx.chars), len(ctx.rooms), ctx.T
        ph = ctx.role_vars("PH")
        ctx.extend(exactly_one(ph))

        # The phantom is alone wherever it is
        for t in range(T):
            for ri in range(R):
                for ci in range(C):
                    for cj in range(C):
                        if ci == cj:
                            continue
                        ctx.add([-ph[ci], -ctx.x(ci, t, ri), -ctx.x(cj, t, ri)])

        # Non-phantoms are seen with someone at least once
        for ci in range(C):
            met = [ctx.together(ci, cj, t, ri)
                   for t in range(T) for ri in range(R) for cj in range(C) if cj != ci]
            ctx.add([ph[ci]] + met)

        return {"PH": ph}

    def decode(self, config: PuzzleConfig, roles: RoleVars, value: ValueFn) -> PhantomFacts:
        return PhantomFacts(phantom=first_true(config.chars, roles["PH"], value, "phantom"))
