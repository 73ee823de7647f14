"""PyQt6 presentation layer: board renderer and window shell."""
