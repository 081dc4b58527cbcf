"""
Service layer.

``aggregation`` computes derived views (hotel ratings, top reviews,
destinations) from an entity store; ``repository`` combines those
views with the store's own operations behind a single facade.
"""
