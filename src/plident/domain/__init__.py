"""Domain layer: checksum schemes, decoding rules, and identifier value objects.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
