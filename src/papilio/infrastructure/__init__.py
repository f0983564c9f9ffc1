"""Infrastructure layer — local key-value persistence.

This layer depends only on stdlib. It must never import from services,
commands, or output.
"""
