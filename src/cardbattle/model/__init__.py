"""Card battle value types."""
