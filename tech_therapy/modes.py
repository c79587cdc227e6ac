"""Support modes: prompt templates, mode cards and visual themes.

Every table in this module is keyed by ``Mode`` and must cover all three
modes; ``tests/test_modes.py`` checks that.
"""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, List


class InvalidModeError(ValueError):
    """Raised when a mode value is not one of the known modes."""

    def __init__(self, value):
        self.value = value
        super().__init__("Invalid mode")


class Mode(str, Enum):
    """The three response styles a user can pick."""
    AFFIRMATIONS = "affirmations"
    ENCOURAGEMENT = "encouragement"
    ROAST = "roast"


@dataclass(frozen=True)
class AnimationTiming:
    """Reveal pacing for one mode, in seconds."""
    char_stagger: float
    char_duration: float
    line_pause: float
    easing: str


@dataclass(frozen=True)
class ModeTheme:
    """Colours and pacing used when rendering a mode."""
    gradient_from: str
    gradient_to: str
    ansi_color: str
    timing: AnimationTiming


@dataclass(frozen=True)
class ModeCard:
    """Copy shown on the mode selection screen."""
    title: str
    description: str
    icon: str


PROMPT_TEMPLATES: Dict[Mode, str] = {
    Mode.AFFIRMATIONS: (
        "Create 3-5 short, powerful affirmations for a developer frustrated with {tech}. "
        "Make them empowering and supportive, similar to: \"pods crash, but you don't\" or "
        "\"you are the orchestrator of your own destiny\". "
        "Format them as a numbered list, one affirmation per line. "
        "Keep each one concise and impactful."
    ),
    Mode.ENCOURAGEMENT: (
        "Create an encouraging, motivational message for a developer struggling with {tech}. "
        "Focus on their potential to overcome the challenge and grow from it. "
        "Keep it authentic and energizing."
    ),
    Mode.ROAST: (
        "Create a humorous, playful roast about {tech} that a frustrated developer would appreciate. "
        "Include technical jokes and wordplay. Keep it light and fun, not mean-spirited."
    ),
}

MODE_CARDS: Dict[Mode, ModeCard] = {
    Mode.AFFIRMATIONS: ModeCard(
        title="Affirmations",
        description="Gentle validation when tech is bringing you down",
        icon="🌊",
    ),
    Mode.ENCOURAGEMENT: ModeCard(
        title="Encouragement",
        description="A motivational boost to keep you going",
        icon="💪",
    ),
    Mode.ROAST: ModeCard(
        title="Roast",
        description="Sometimes you just need to laugh about it",
        icon="🔥",
    ),
}

MODE_THEMES: Dict[Mode, ModeTheme] = {
    Mode.AFFIRMATIONS: ModeTheme(
        gradient_from="#2563eb",
        gradient_to="#60a5fa",
        ansi_color="\033[34m",  # Blue
        timing=AnimationTiming(char_stagger=0.04, char_duration=0.3, line_pause=2.5, easing="easeOut"),
    ),
    Mode.ENCOURAGEMENT: ModeTheme(
        gradient_from="#9333ea",
        gradient_to="#c084fc",
        ansi_color="\033[35m",  # Magenta
        timing=AnimationTiming(char_stagger=0.03, char_duration=0.2, line_pause=2.0, easing="easeInOut"),
    ),
    Mode.ROAST: ModeTheme(
        gradient_from="#dc2626",
        gradient_to="#f87171",
        ansi_color="\033[31m",  # Red
        timing=AnimationTiming(char_stagger=0.02, char_duration=0.1, line_pause=1.5, easing="backOut"),
    ),
}


def parse_mode(value) -> Mode:
    """
    Resolve a raw mode value.

    Args:
        value: Mode name as sent by the client

    Returns:
        The matching Mode

    Raises:
        InvalidModeError: If the value is not a known mode
    """
    if isinstance(value, Mode):
        return value
    try:
        return Mode(value)
    except ValueError:
        raise InvalidModeError(value) from None


def build_prompt(tech: str, mode: Mode) -> str:
    """Embed the technology name into the template for the given mode."""
    return PROMPT_TEMPLATES[mode].format(tech=tech)


def get_theme(mode: Mode) -> ModeTheme:
    return MODE_THEMES[mode]


def describe_modes() -> List[dict]:
    """
    Get the mode catalogue for the front end.

    Returns:
        One dict per mode, in selection order, with card copy and theme
    """
    return [
        {
            "mode": mode.value,
            **asdict(MODE_CARDS[mode]),
            "theme": {
                "gradient_from": MODE_THEMES[mode].gradient_from,
                "gradient_to": MODE_THEMES[mode].gradient_to,
                "timing": asdict(MODE_THEMES[mode].timing),
            },
        }
        for mode in Mode
    ]
