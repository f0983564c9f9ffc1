"""Domain layer — catalog, tasks, geometry, and panel lifecycle.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
