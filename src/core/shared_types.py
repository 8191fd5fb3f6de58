"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    GAME_OVER = "game over"


# --- NOTE the domain layer uses its own Disc enum (src/othello/discs.py), which also holds an EMPTY option.
# --- These are the transport-safe names, the same member names are used on both sides so conversion goes via `.name`


class Player(StrEnum):
    BLACK = "black"
    WHITE = "white"


class Outcome(StrEnum):
    BLACK_WINS = "black wins"
    WHITE_WINS = "white wins"
    TIE = "tie"
