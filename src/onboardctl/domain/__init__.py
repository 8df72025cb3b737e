"""Domain layer — rules, field schemas, and the form schema.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
