"""JSON-file persistence adapters."""
