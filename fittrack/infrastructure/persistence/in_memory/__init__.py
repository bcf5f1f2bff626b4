"""In-memory persistence adapters."""
