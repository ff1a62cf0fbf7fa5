from __future__ import annotations

"""Mnemonic system tables: palace locations, pegs, people and digit codes.

Each table is small and fixed; generators sample from it and never ask
for more distinct rows than it holds.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Location:
    id: int
    name: str


@dataclass(frozen=True)
class Peg:
    number: int
    rhyme: str


@dataclass(frozen=True)
class Person:
    id: int
    name: str
    feature: str
    description: str


@dataclass(frozen=True)
class MajorCode:
    digit: int
    sounds: str
    examples: str


@dataclass(frozen=True)
class PaoEntry:
    number: str
    person: str
    action: str
    object: str


@dataclass(frozen=True)
class DominicEntry:
    digit: str
    person: str
    action: str
    initials: str


PALACE_LOCATIONS: Tuple[Location, ...] = (
    Location(1, "Front Door"),
    Location(2, "Living Room"),
    Location(3, "Kitchen"),
    Location(4, "Bedroom"),
    Location(5, "Bathroom"),
    Location(6, "Study Room"),
    Location(7, "Dining Room"),
    Location(8, "Garden"),
    Location(9, "Garage"),
    Location(10, "Balcony"),
    Location(11, "Attic"),
    Location(12, "Basement"),
)

PEG_RHYMES: Tuple[Peg, ...] = (
    Peg(1, "Bun"),
    Peg(2, "Shoe"),
    Peg(3, "Tree"),
    Peg(4, "Door"),
    Peg(5, "Hive"),
    Peg(6, "Sticks"),
    Peg(7, "Heaven"),
    Peg(8, "Gate"),
    Peg(9, "Wine"),
    Peg(10, "Hen"),
)

PEOPLE: Tuple[Person, ...] = (
    Person(1, "Alex", "Curly Hair", "Has distinctive curly blonde hair"),
    Person(2, "James", "Sharp Features", "Has sharp, defined facial features"),
    Person(3, "Carlos", "Bright Smile", "Known for his wide, bright smile"),
    Person(4, "Thomas", "Strong Jawline", "Has a prominent, strong jawline"),
    Person(5, "Marco", "Beard", "Has a distinctive well-groomed beard"),
    Person(6, "Daniel", "Square Jaw", "Has a strong, square jawline"),
    Person(7, "Andre", "Shaved Head", "Known for his clean-shaven head"),
    Person(8, "Viktor", "High Forehead", "Has a distinctive high forehead"),
    Person(9, "Kevin", "Wide Eyes", "Has notably large, expressive eyes"),
    Person(10, "Stefan", "Chiseled Face", "Has chiseled, well-defined features"),
    Person(11, "Lucas", "Thick Eyebrows", "Has prominent, dark eyebrows"),
    Person(12, "Rafael", "Stubble Beard", "Known for his signature stubble"),
)

MAJOR_SYSTEM: Tuple[MajorCode, ...] = (
    MajorCode(0, "s, z", "Sea, Zoo"),
    MajorCode(1, "t, d", "Tea, Day"),
    MajorCode(2, "n", "Noah, New"),
    MajorCode(3, "m", "Ma, Moon"),
    MajorCode(4, "r", "Ray, Row"),
    MajorCode(5, "l", "Law, Owl"),
    MajorCode(6, "sh, ch", "Shoe, Cheese"),
    MajorCode(7, "k, g", "Key, Go"),
    MajorCode(8, "f, v", "Foe, Ivy"),
    MajorCode(9, "p, b", "Pie, Bee"),
)

# Ready-made words for a few two-digit numbers
WORD_SUGGESTIONS: Dict[str, List[str]] = {
    "12": ["tin", "tuna", "tone"],
    "23": ["name", "enemy", "gnome"],
    "34": ["mower", "hammer", "mare"],
    "45": ["rail", "roll", "reel"],
    "56": ["lash", "leash", "lush"],
    "67": ["shake", "chick", "jog"],
    "78": ["cave", "coffee", "wife"],
    "89": ["fob", "fab", "vibe"],
    "90": ["bus", "base", "boss"],
    "21": ["net", "nut", "nod"],
}

# Simplified PAO table: ten doubled numbers instead of 00-99
PAO_SYSTEM: Tuple[PaoEntry, ...] = (
    PaoEntry("00", "Superhero", "Flying", "Cape"),
    PaoEntry("11", "Chef", "Cooking", "Pan"),
    PaoEntry("22", "Dancer", "Dancing", "Shoes"),
    PaoEntry("33", "Musician", "Playing", "Guitar"),
    PaoEntry("44", "Athlete", "Running", "Medal"),
    PaoEntry("55", "Artist", "Painting", "Brush"),
    PaoEntry("66", "Scientist", "Mixing", "Flask"),
    PaoEntry("77", "Magician", "Waving", "Wand"),
    PaoEntry("88", "Pirate", "Sailing", "Ship"),
    PaoEntry("99", "Robot", "Beeping", "Antenna"),
)

DOMINIC_SYSTEM: Tuple[DominicEntry, ...] = (
    DominicEntry("0", "Secret Agent", "Sneaking", "SA"),
    DominicEntry("1", "Albert Einstein", "Thinking", "AE"),
    DominicEntry("2", "Beyonce", "Dancing", "BB"),
    DominicEntry("3", "Charlie Chaplin", "Laughing", "CC"),
    DominicEntry("4", "David Beckham", "Kicking", "DB"),
    DominicEntry("5", "Elvis Presley", "Singing", "EP"),
    DominicEntry("6", "Freddie Mercury", "Performing", "FM"),
    DominicEntry("7", "Gal Gadot", "Jumping", "GG"),
    DominicEntry("8", "Harry Potter", "Casting Spells", "HP"),
    DominicEntry("9", "Indiana Jones", "Adventuring", "IJ"),
)


def pao_entry(number: str) -> PaoEntry | None:
    for e in PAO_SYSTEM:
        if e.number == number:
            return e
    return None


def dominic_entry(digit: str) -> DominicEntry | None:
    for e in DOMINIC_SYSTEM:
        if e.digit == digit:
            return e
    return None
