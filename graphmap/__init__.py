"""Graphmap - keeps folder index notes in sync with an Obsidian vault."""

__version__ = "0.1.0"
