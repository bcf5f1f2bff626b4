"""Core model of the body metrics domain."""
