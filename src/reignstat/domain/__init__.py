"""Domain layer — ruler values, year parsing, validation and statistics.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
