"""Service layer — task store, panel selection, and the wheel surface.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
