from alibigen.config import PuzzleConfig
from alibigen.core.logging import get_logger
from alibigen.encodings import define_and, define_or, exactly_one
from alibigen.scenarios.base import RoleVars, ScenarioFacts, ScenarioPack, ValueFn, first_true

logger = get_logger("alibigen.scenarios.poison")

ASSASSIN = 0  # the first listed character


class PoisonFacts(ScenarioFacts):
    assassin: str
    victim: str
    poison_time: int  # 1-based
    poison_room: str


class PoisonPack(ScenarioPack):
    """
    The first character poisons a victim at one (time, room): the two are
    alone together there, and that is the only moment the assassin is ever
    alone with exactly one other person.
    """
    min_chars = 2

    @property
    def name(self) -> str:
        return "poison"

    def compile(self, ctx) -> RoleVars:
        C, R, T = len(ctx.chars), len(ctx.rooms), ctx.T
        settings = ctx.config.scenarios

        v = ctx.role_vars("V")
        pt = [ctx.var("PT", t) for t in range(T)]
        pr = [ctx.var("PR", room) for room in ctx.rooms]
        ctx.extend(exactly_one(v))
        ctx.extend(exactly_one(pt))
        ctx.extend(exactly_one(pr))
        ctx.add([-v[ASSASSIN]])

        if settings.poison_room is not None:
            ri = ctx.graph.idx.get(settings.poison_room)
            if ri is None:
                logger.warning(f"Ignoring fixed poison room '{settings.poison_room}': not a known room")
            else:
                ctx.add([pr[ri]])
        if settings.poison_time is not None:
            t = settings.poison_time - 1
            if 0 <= t < T:
                ctx.add([pt[t]])
            else:
                logger.warning(f"Ignoring fixed poison time {settings.poison_time}: outside 1..{T}")

        # At the poison moment only assassin and victim are in the poison room
        for t in range(T):
            for ri in range(R):
                for vi in range(C):
                    if vi == ASSASSIN:
                        continue
                    guard = [-pt[t], -pr[ri], -v[vi]]
                    ctx.add(guard + [ctx.x(ASSASSIN, t, ri)])
                    ctx.add(guard + [ctx.x(vi, t, ri)])
                    for ck in range(C):
                        if ck in (ASSASSIN, vi):
                            continue
                        ctx.add(guard + [-ctx.x(ck, t, ri)])

        # Being alone with exactly one other person implies the poison moment
        for t in range(T):
            for ri in range(R):
                moment = ctx.var("poisonMoment", t, ctx.rooms[ri])
                choices = []
                for vi in range(C):
                    if vi == ASSASSIN:
                        continue
                    choice = ctx.var("poisonChoice", t, ctx.rooms[ri], ctx.chars[vi])
                    ctx.extend(define_and(choice, [pt[t], pr[ri], v[vi]]))
                    choices.append(choice)
                ctx.extend(define_or(moment, choices))

                for ci in range(C):
                    if ci == ASSASSIN:
                        continue
                    ctx.add([-ctx.alone((ASSASSIN, ci), t, ri), moment])

        return {"V": v, "PT": pt, "PR": pr}

    def decode(self, config: PuzzleConfig, roles: RoleVars, value: ValueFn) -> PoisonFacts:
        return PoisonFacts(
            assassin=config.chars[ASSASSIN],
            victim=first_true(config.chars, roles["V"], value, "victim"),
            poison_time=first_true(range(1, config.T + 1), roles["PT"], value, "poison time"),
            poison_room=first_true(config.rooms, roles["PR"], value, "poison room"),
        )
