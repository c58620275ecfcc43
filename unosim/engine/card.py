"""Card, Color and variant types for UNO."""

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    """Card colors. WILD marks a card whose color is declared when played."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    WILD = "wild"

    @property
    def letter(self) -> str:
        return _COLOR_LETTERS[self]

    def __str__(self) -> str:
        return self.letter


_COLOR_LETTERS = {
    Color.RED: "R",
    Color.BLUE: "B",
    Color.GREEN: "G",
    Color.YELLOW: "Y",
    Color.WILD: "*",
}

# Non-wild colors in deck construction order.
SUIT_COLORS = (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW)

# Order in which a wild declaration is expanded into concrete moves.
DECLARABLE_COLORS = (Color.RED, Color.YELLOW, Color.BLUE, Color.GREEN)


class CardVariant(str, Enum):
    """What a card is, and therefore what it does when played."""

    VALUE = "value"
    REVERSE = "reverse"
    CANCEL = "cancel"
    DRAW_TWO = "draw_two"
    DRAW_FOUR = "draw_four"
    WILD = "wild"


DRAW_VARIANTS = (CardVariant.DRAW_TWO, CardVariant.DRAW_FOUR)


@dataclass(frozen=True)
class Card:
    """A UNO card.

    `value` is 0-9 for VALUE cards and 0 for everything else.
    Wild and draw-four cards carry Color.WILD until they are played.
    """

    value: int
    color: Color
    variant: CardVariant

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 9:
            raise ValueError(f"Invalid card value: {self.value}")

    def __str__(self) -> str:
        c = self.color.letter
        if self.variant is CardVariant.VALUE:
            return f"V{self.value}{c}"
        if self.variant is CardVariant.DRAW_TWO:
            return f"D2{c}"
        if self.variant is CardVariant.DRAW_FOUR:
            return f"D4{c}"
        if self.variant is CardVariant.WILD:
            return f"*-{c}"
        if self.variant is CardVariant.CANCEL:
            return f"S-{c}"
        return f"R-{c}"
