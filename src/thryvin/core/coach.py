"""Coach assignment: pick a coach name from gender and style pools."""

import logging
import random

from pydantic import BaseModel

from .exceptions import NoCoachAvailableError

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "balanced"

COACH_POOL: dict[str, dict[str, list[str]]] = {
    "male": {
        "motivational": ["Zo Blaze", "Max Ryder", "Chase Summit", "Kai Storm"],
        "technical": ["Nathan Pierce", "Ethan Cross", "Lucas Kane", "Owen Sharp"],
        "disciplined": ["Marcus Stone", "Roman Steel", "Miles Forge", "Dex Iron"],
        "balanced": ["Jordan Rivers", "Blake Harper", "Cole Mason", "Finn Carter"],
    },
    "female": {
        "motivational": ["Luna Blaze", "Aria Rush", "Nova Flame", "Maya Surge"],
        "technical": ["Sage Pierce", "Quinn Atlas", "Eva Cross", "Iris Vale"],
        "disciplined": ["Reyna Stone", "Phoenix Steel", "Jade Archer", "Raven Storm"],
        "balanced": ["Harper Lane", "Riley Brooks", "Skye Morgan", "Eden Rivers"],
    },
}

COACH_PERSONALITIES = {
    "motivational": "I'm here to ignite your fire and push you beyond your limits! Let's crush those goals together!",
    "technical": "I'll guide you with precision and form-perfect training. Every rep counts, every detail matters.",
    "disciplined": "No excuses, no shortcuts. We're building discipline and strength through structured training.",
    "balanced": "Together we'll find the perfect balance between intensity and sustainability. Let's build lasting results!",
}

COACH_DESCRIPTIONS = {
    "motivational": "High-energy training focused on pushing limits and achieving peak performance through positive reinforcement.",
    "technical": "Detail-oriented coaching emphasizing perfect form, biomechanics, and progressive overload principles.",
    "disciplined": "Structured, no-nonsense approach building mental toughness and consistency through disciplined training protocols.",
    "balanced": "Well-rounded methodology combining intensity with recovery, creating sustainable long-term fitness habits.",
}


class CoachSelection(BaseModel):
    """The coach shown to the user."""

    model_config = {"frozen": True}

    name: str
    style: str


class CoachProfile(BaseModel):
    """Display copy for a coaching style."""

    style: str
    personality: str
    description: str


def coach_profile(style: str) -> CoachProfile:
    """Look up the display copy for a style, falling back to balanced."""
    if style not in COACH_PERSONALITIES:
        style = DEFAULT_STYLE
    return CoachProfile(
        style=style,
        personality=COACH_PERSONALITIES[style],
        description=COACH_DESCRIPTIONS[style],
    )


class CoachAssigner:
    """
    Draws coach names uniformly at random from a pool.

    The random source is injected so draws can be reproduced.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        pool: dict[str, dict[str, list[str]]] | None = None,
    ):
        self.rng = rng or random.Random()
        self.pool = pool or COACH_POOL

    def resolve_style(self, style: str) -> str:
        styles = {s for by_style in self.pool.values() for s in by_style}
        return style if style in styles else DEFAULT_STYLE

    def candidates(self, gender: str, style: str) -> list[str]:
        """
        Resolve the candidate names for a gender and style.

        Known genders use their style list, or their balanced list when the
        style is absent. Any other gender gets every name in the pool.
        """
        if gender in self.pool:
            by_style = self.pool[gender]
            if style in by_style:
                return list(by_style[style])
            return list(by_style.get(DEFAULT_STYLE, []))
        return [
            name
            for by_style in self.pool.values()
            for names in by_style.values()
            for name in names
        ]

    def assign(self, gender: str, style: str) -> CoachSelection:
        """
        Draw a coach for a gender and style.

        Raises:
            NoCoachAvailableError: If the pool resolves to no candidates
        """
        names = self.candidates(gender, style)
        if not names:
            raise NoCoachAvailableError(gender, style)
        name = self.rng.choice(names)
        logger.info(f"Assigned coach {name} ({gender or 'unspecified'}/{style})")
        return CoachSelection(name=name, style=self.resolve_style(style))

    def reroll(self, current_name: str, gender: str, style: str) -> CoachSelection:
        """
        Draw a different coach, excluding the current one.

        When the current coach is the only candidate, it is kept.
        """
        names = [n for n in self.candidates(gender, style) if n != current_name]
        if not names:
            logger.debug(f"Reroll exhausted for {gender}/{style}, keeping {current_name}")
            return CoachSelection(name=current_name, style=self.resolve_style(style))
        name = self.rng.choice(names)
        logger.info(f"Rerolled coach {current_name} -> {name}")
        return CoachSelection(name=name, style=self.resolve_style(style))
