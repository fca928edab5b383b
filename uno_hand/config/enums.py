from enum import Enum

class CardColor(Enum):
    RED = "Red"
    YELLOW = "Yellow"
    GREEN = "Green"
    BLUE = "Blue"

class CardType(Enum):
    NUMBERED = "NUMBERED"
    SKIP = "SKIP"
    REVERSE = "REVERSE"
    DRAW = "DRAW"
    WILD = "WILD"
    WILD_DRAW = "WILD DRAW"

class Direction(Enum):
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1
