"""Core model of the workout domain."""
