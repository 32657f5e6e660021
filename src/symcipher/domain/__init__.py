"""Domain layer — alphabet, validation, keys, and the shift transform.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
