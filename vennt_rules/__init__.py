"""Rules evaluation core for Vennt characters: ability costs, usability and ordering."""

__version__ = "0.1.0"
