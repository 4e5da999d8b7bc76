"""Core entities for the roster service."""

from dataclasses import dataclass, fields
from typing import Any, Dict

from .errors import BadRequestError

_INT_FIELDS = ("id", "experience")


@dataclass
class Player:
    """Represents a player on the roster.

    Number, height, weight and age are free text as stored; they are
    compared and sorted as strings.
    """

    # Database ID, 0 until the player has been created
    id: int = 0

    name: str = ""
    number: str = ""
    position: str = ""
    height: str = ""
    weight: str = ""
    age: str = ""
    experience: int = 0
    college: str = ""

    def is_new(self) -> bool:
        """Check if this player still has to be created rather than updated."""
        return self.id <= 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON object representation."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Any) -> "Player":
        """Build a player from a decoded JSON object.

        Unknown keys are ignored; missing keys and null values keep their
        defaults.

        Raises:
            BadRequestError: If data is not an object or a value has the wrong type
        """
        if not isinstance(data, dict):
            raise BadRequestError()

        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                continue
            if f.name in _INT_FIELDS:
                # bool is an int subclass but not a JSON number
                if not isinstance(value, int) or isinstance(value, bool):
                    raise BadRequestError()
            elif not isinstance(value, str):
                raise BadRequestError()
            values[f.name] = value
        return cls(**values)

    def __str__(self) -> str:
        """Roster summary line for the player."""
        return (
            f"[{self.id}] {self.name} ({self.position}) -- #{self.number}, "
            f"{self.height}, {self.weight}lb, {self.age}yo, {self.experience}exp -- {self.college}"
        )
