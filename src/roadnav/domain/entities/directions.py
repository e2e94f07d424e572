from dataclasses import dataclass
from enum import Enum

from roadnav.domain.entities.geography import UNKNOWN_ROAD
from roadnav.domain.errors import ParseFailure


class TurnKind(Enum):
    START = "Start"
    STRAIGHT = "Go straight"
    SLIGHT_LEFT = "Slight left"
    SLIGHT_RIGHT = "Slight right"
    LEFT = "Turn left"
    RIGHT = "Turn right"
    SHARP_LEFT = "Sharp left"
    SHARP_RIGHT = "Sharp right"

    @property
    def phrase(self) -> str:
        return self.value

    @classmethod
    def classify(cls, turn_deg: float) -> "TurnKind":
        """Map a signed turn in (-180, 180] degrees onto a turn kind."""
        if -15.0 <= turn_deg <= 15.0:
            return cls.STRAIGHT
        if 15.0 < turn_deg <= 30.0:
            return cls.SLIGHT_RIGHT
        if -30.0 <= turn_deg < -15.0:
            return cls.SLIGHT_LEFT
        if 30.0 < turn_deg <= 100.0:
            return cls.RIGHT
        if -100.0 <= turn_deg < -30.0:
            return cls.LEFT
        if turn_deg > 100.0:
            return cls.SHARP_RIGHT
        return cls.SHARP_LEFT


_PHRASES = {k.phrase: k for k in TurnKind}
_ON = " on "
_CONTINUE = " and continue for "
_TAIL = " miles."


@dataclass(frozen=True)
class DirectionStep:
    turn: TurnKind = TurnKind.STRAIGHT
    road: str = UNKNOWN_ROAD
    distance_miles: float = 0.0

    def __str__(self) -> str:
        return f"{self.turn.phrase}{_ON}{self.road}{_CONTINUE}{self.distance_miles:.3f}{_TAIL}"

    def approx_equal(self, other: "DirectionStep", tol: float = 1e-3) -> bool:
        return (
            self.turn is other.turn
            and self.road == other.road
            and abs(self.distance_miles - other.distance_miles) <= tol
        )

    @classmethod
    def from_text(cls, text: str) -> "DirectionStep":
        """
        Parse "<Phrase> on <Road> and continue for <d> miles."

        Tokens are consumed left to right: a phrase from the closed set
        (case-sensitive), the road span up to the last " and continue for ",
        then a plain decimal literal. Anything else raises ParseFailure.
        """
        if not isinstance(text, str):
            raise ParseFailure(repr(text), "not a string")

        turn = None
        for phrase, kind in _PHRASES.items():
            if text.startswith(phrase + _ON):
                turn = kind
                break
        if turn is None:
            raise ParseFailure(text, "unknown turn phrase")
        rest = text[len(turn.phrase) + len(_ON) :]

        if not rest.endswith(_TAIL):
            raise ParseFailure(text, "missing ' miles.' suffix")
        rest = rest[: -len(_TAIL)]

        road, sep, number = rest.rpartition(_CONTINUE)
        if not sep:
            raise ParseFailure(text, "missing ' and continue for '")

        if not _is_decimal(number):
            raise ParseFailure(text, f"non-numeric distance {number!r}")
        return cls(turn=turn, road=road, distance_miles=float(number))


def _is_decimal(s: str) -> bool:
    digits = s.replace(".", "", 1)
    return bool(digits) and digits.isascii() and digits.isdigit()
