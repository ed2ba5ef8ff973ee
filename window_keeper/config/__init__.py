"""Configuration, constants and version information."""
