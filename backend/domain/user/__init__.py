"""User domain module.

This domain manages directory users: identity, role, name, gender and
soft-delete lifecycle, plus the filter semantics used to search them.
"""
