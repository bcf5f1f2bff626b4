"""Workout domain: weekly plan and exercises."""
