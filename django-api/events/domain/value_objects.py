"""Domain primitives that enforce validity at creation time."""

from enum import Enum
from typing import Self


class EventCategory(Enum):
    """The closed set of event categories."""

    HACKATHONS = "Hackathons"
    ART_COMPETITIONS = "Art Competitions"
    DANCE_AND_MUSIC = "Dance & Music"
    CULTURAL_EVENTS = "Cultural Events"
    TECH_EVENTS = "Tech Events"
    WORKSHOPS = "Workshops"

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Parse a category label as stored in event documents.

        Raises:
            ValueError: If the label is not one of the six categories.
        """
        return cls(label)

    def __str__(self) -> str:
        return self.value
