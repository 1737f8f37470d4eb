"""Domain layer — component types and layout rules.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
