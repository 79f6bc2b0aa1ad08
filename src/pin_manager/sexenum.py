"""
Enumeration for the sex encoded in a personal identity number
"""

from enum import Enum, auto


class Sex(str, Enum):
    MALE = auto()
    FEMALE = auto()
