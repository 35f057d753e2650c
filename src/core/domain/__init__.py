"""Domain models and helpers.

Why:
- Pure, strict data structures (Pydantic v2) and string helpers live here.
- The domain knows nothing about HTTP, terminals or the CLI.
"""
