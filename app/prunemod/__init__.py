"""prunemod - remove superfluous files from installed package trees."""

__version__ = "0.1.0"
