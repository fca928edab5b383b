import os

from .enums import CardColor, CardType

# Hand Settings
INITIAL_HAND_SIZE = 7
MIN_PLAYERS = 2
MAX_PLAYERS = 10
DRAW_TWO_PENALTY_CARDS = 2

# Wild starter cards go back into the draw pile; give up after this many redraws
MAX_STARTER_REDRAWS = 100

# Deck Composition
# Color cards (Red, Yellow, Green, Blue)
# 0: 1 per color
# 1-9: 2 per color
# Action cards (Skip, Reverse, Draw): 2 per color
SUIT_COLORS = [CardColor.RED, CardColor.YELLOW, CardColor.GREEN, CardColor.BLUE]
ACTION_TYPES = [CardType.SKIP, CardType.REVERSE, CardType.DRAW]
ACTION_CARD_COPIES = 2

# Wild cards
# Wild: 4
# Wild Draw Four: 4
WILD_CARD_COPIES = 4

DECK_SIZE = 108

# Logging
LOG_DIR = os.environ.get("UNO_HAND_LOG_DIR", os.path.join(os.getcwd(), "log"))
LOG_LEVEL = os.environ.get("UNO_HAND_LOG_LEVEL", "INFO")
