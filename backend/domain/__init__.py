"""Domain layer for the staff directory.

Entities, value objects, filters and repository ports, decoupled from the
HTTP surface and from persistence.
"""
