"""Browse SDKMAN candidates from the terminal."""

__version__ = "0.1.0"
