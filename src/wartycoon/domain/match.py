"""Match aggregate tying actors to a shared battlefield.

The match only sequences calls into the rules layer; prompting players and
iterating rounds stay with the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .actions import Action, Outcome, QuitOutcome
from .actor import Actor, create_actor
from .battlefield import Battlefield
from .conflict import MatchResolution, resolve_match
from .errors import ActionError, UnknownActor
from .models import ActorName
from .rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Match:
    """Actors, battlefield and quit bookkeeping for one game."""

    battlefield: Battlefield
    actors: dict[ActorName, Actor] = field(default_factory=dict)
    rules: RulesConfig = DEFAULT_RULES
    quitters: set[ActorName] = field(default_factory=set)

    @classmethod
    def create(
        cls,
        names: Iterable[str],
        *,
        width: int | None = None,
        height: int | None = None,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> Match:
        """Build the battlefield and one actor per name (names must be unique)."""

        battlefield = Battlefield(
            width if width is not None else rules.board.width,
            height if height is not None else rules.board.height,
        )
        match = cls(battlefield=battlefield, rules=rules)
        for name in names:
            match.add_actor(name)
        logger.info(
            "match created on %dx%d board with actors %s",
            battlefield.width,
            battlefield.height,
            list(match.actors),
        )
        return match

    def add_actor(self, name: str) -> Actor:
        actor = create_actor(name, self.actors.values(), rules=self.rules)
        self.actors[actor.name] = actor
        return actor

    def actor(self, name: str) -> Actor:
        try:
            return self.actors[ActorName(name)]
        except KeyError:
            raise UnknownActor(name) from None

    @property
    def active_actors(self) -> list[Actor]:
        """Actors that have not quit, in registration order."""

        return [actor for name, actor in self.actors.items() if name not in self.quitters]

    @property
    def should_continue(self) -> bool:
        """False once any actor has quit; the current round still finishes."""

        return not self.quitters

    def submit(self, name: str, action: Action) -> Outcome:
        """Execute ``action`` for the named actor."""

        actor = self.actor(name)
        try:
            outcome = actor.execute(action, self.battlefield)
        except ActionError as exc:
            logger.warning("action %s rejected for %s: %s", action.kind, name, exc)
            raise
        if isinstance(outcome, QuitOutcome):
            self.quitters.add(actor.name)
            logger.info("actor %s quit the match", actor.name)
        return outcome

    def evaluate(self) -> MatchResolution:
        return resolve_match(self.battlefield, rules=self.rules)
