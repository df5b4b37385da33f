"""Domain layer — commands, parsing, and the in-memory directory.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""
