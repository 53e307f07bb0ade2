"""Mock decoder: a TCP stand-in for a transponder timing decoder."""

__version__ = "0.1.0"
