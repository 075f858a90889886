"""shipzones: damage zone and hit location allocation for starship designs."""

__version__ = "0.1.0"
