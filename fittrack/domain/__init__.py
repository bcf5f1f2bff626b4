"""Domain layer: pure calculation and planning logic."""
