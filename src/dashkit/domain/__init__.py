"""Domain layer: the pure helper functions.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
