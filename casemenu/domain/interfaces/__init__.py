"""Domain Interfaces (Ports):

Defines the contracts (Abstract Base Classes) that commands and user
interface adapters must implement.
"""
