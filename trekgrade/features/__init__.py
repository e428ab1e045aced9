"""
Feature modules.

- grade: terrain grade engine, elevation accumulator, cost multipliers
"""
