"""Configuration and version helpers shared by the command-line tools."""
