"""Domain Layer: the receiver model, value types, interfaces and errors.

Nothing in here depends on the core or infrastructure layers.
"""
