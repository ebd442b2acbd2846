"""Configuration model for a desktop dock: desktop entries, application menu, dock panels and appearance."""

__version__ = "0.1.0"