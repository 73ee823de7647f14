"""Colour themes and application style sheet."""
