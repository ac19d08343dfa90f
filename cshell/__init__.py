"""An interactive Linux shell with built-in navigation, search, history, aliases and job control."""

__version__ = "0.1.0"