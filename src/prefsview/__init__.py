"""Browse the key/value pairs an editor keeps in its per-user preference store."""

__version__ = "0.1.0"
