"""Infrastructure layer: document I/O.

This layer depends on stdlib and third-party libs (ruamel.yaml).
It must never import from services, commands, or output.
"""
