"""Terminal colors for the print-colored statement. The interpreter only hands (text, Color) pairs to a ColorRenderer;
everything termcolor-specific stays in this module.
"""

import random
from enum import Enum

from termcolor import colored


class Color(Enum):
    """Colors accepted by the print-colored statement, valued by their name in zipette source."""
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"
    CYAN = "cyan"
    ORANGE = "orange"
    WHITE = "white"
    BROWN = "brown"
    PINK = "pink"
    MULTICOLOR = "multicolor"

    @classmethod
    def from_name(cls, name):
        """Returns the Color called name, or None if there is none."""
        try:
            return cls(name)
        except ValueError:
            return None


# nearest 16-color terminal equivalents
TERMCOLORS = {
    Color.RED: "red",
    Color.BLUE: "blue",
    Color.GREEN: "green",
    Color.YELLOW: "light_yellow",
    Color.PURPLE: "magenta",
    Color.CYAN: "cyan",
    Color.ORANGE: "light_red",
    Color.WHITE: "white",
    Color.BROWN: "yellow",
    Color.PINK: "light_magenta",
}


class ColorRenderer:
    """Renders text in a Color. Multicolor rendering draws one color per character from this renderer's own random
    generator, so two renderers built with the same seed produce the same output.
    """

    def __init__(self, seed=None, force_color=None):
        self.random = random.Random(seed)
        self.force_color = force_color  # None lets termcolor decide (tty, NO_COLOR, FORCE_COLOR)

    def render(self, text, color):
        if color is Color.MULTICOLOR:
            palette = list(TERMCOLORS.values())
            return "".join(self._colored(char, self.random.choice(palette)) for char in text)
        return self._colored(text, TERMCOLORS[color])

    def _colored(self, text, termcolor):
        if self.force_color is None:
            return colored(text, termcolor)
        elif self.force_color:
            return colored(text, termcolor, force_color=True)
        return colored(text, termcolor, no_color=True)
