"""Infrastructure Layer: Contains concrete implementations and adapters.

Casing primitives, configuration loading, logging setup and the rich
console display live here.
"""
