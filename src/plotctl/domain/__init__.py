"""Domain layer — plot models, pattern rules, image synthesis, paging.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
