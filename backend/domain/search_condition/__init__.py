"""Search condition domain module.

Named filter combinations an operator saves and reapplies later.
"""
