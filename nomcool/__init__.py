"""A console multiplication quiz with experience levels, gold and mascot skins."""

__version__ = "1.0.0"