"""Core infrastructure: logging and contracts."""
