"""Factory for WarTycoon matches.

Wires configuration into the domain layer so callers (the round driver or
an interactive front end) do not have to read settings themselves.

Example:
    from wartycoon.factory import create_match
    match = create_match(["alice", "bob"])
    match.submit("alice", Harvest())
"""

from __future__ import annotations

from collections.abc import Sequence

from wartycoon.config import Settings, get_settings
from wartycoon.domain.match import Match
from wartycoon.domain.rules_config import DEFAULT_RULES, RulesConfig


def create_match(
    names: Sequence[str],
    *,
    settings: Settings | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> Match:
    """Create a match sized from ``settings``.

    Args:
        names: Actor names, unique within the match
        settings: Overrides the cached application settings

    Returns:
        A match with an empty battlefield and one fresh actor per name
    """
    settings = settings or get_settings()
    if len(names) != settings.player_count:
        raise ValueError(
            f"expected {settings.player_count} actor name(s), got {len(names)}"
        )
    return Match.create(
        names,
        width=settings.board_width,
        height=settings.board_height,
        rules=rules,
    )
