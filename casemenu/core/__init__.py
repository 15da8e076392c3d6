"""Core Application Layer: the command menu, the concrete commands and the
command handler that plays the client role for the CLI.
"""
