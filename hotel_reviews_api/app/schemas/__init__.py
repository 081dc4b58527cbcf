"""
Pydantic schema definitions for API payloads and read models.

Python attributes are snake_case; the JSON representation uses the
camelCase keys the web client expects (``videoUrl``, ``averageRating``).
"""
