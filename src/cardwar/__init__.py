"""cardwar - a simulation of the card game War."""

__version__ = "0.1.0"
