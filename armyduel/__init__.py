"""A console turn-based army duel against an undead bot: units, armies, battles and menus."""

__version__ = "0.1.0"