"""A RESTful JSON API for a catalogue of games, served over WSGI."""

__version__ = "0.1.0"
__all__ = ["__version__"]