"""Domain layer — documents, transforms, and the platform registry.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
