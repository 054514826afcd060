"""Core infrastructure: base locations, configuration and theming."""
