"""
Name Generator

Random first/last names for generated players, prospects and coaches.
"""

import random
from typing import Optional, Tuple


FIRST_NAMES = [
    "Aaron", "Adrian", "Antonio", "Brandon", "Calvin", "Darius", "DeAndre",
    "Derek", "Devon", "Ezekiel", "Frank", "Garrett", "Isaiah", "Jalen",
    "Jamal", "Jordan", "Justin", "Keion", "Lamar", "Marcus", "Marshawn",
    "Michael", "Nick", "Patrick", "Quentin", "Robert", "Saquon", "Terrell",
    "Tyler", "Victor", "Zach", "Alvin", "Carlos", "Damien", "Eddie", "Felix",
    "Brian", "Chris", "Dante", "Elijah", "Grant", "Hunter", "Jaylen", "Kyle",
    "Logan", "Malik", "Nathan", "Omar", "Preston", "Reggie", "Sean", "Trevon",
]

LAST_NAMES = [
    "Adams", "Allen", "Anderson", "Brown", "Davis", "Garcia", "Harris",
    "Jackson", "Johnson", "Jones", "Lewis", "Martin", "Miller", "Moore",
    "Robinson", "Smith", "Taylor", "Thomas", "Thompson", "Washington",
    "White", "Williams", "Wilson", "Young", "Bell", "Cooper", "Green",
    "Hill", "King", "Mitchell", "Nelson", "Parker", "Reed", "Scott", "Turner",
    "Walker", "Ward", "Carter", "Edwards", "Foster", "Graham", "Hayes",
]


class NameGenerator:
    """Draws names from the shared name pools using the injected RNG."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self) -> Tuple[str, str]:
        """Return a (first_name, last_name) pair."""
        return self.rng.choice(FIRST_NAMES), self.rng.choice(LAST_NAMES)
