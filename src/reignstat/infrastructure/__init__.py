"""Infrastructure layer — fetching and decoding ruler data.

This layer depends on stdlib and third-party libs (httpx, pydantic).
It may build domain values but must never import from services,
commands, or output.
"""
