"""Domain layer — place types, the Location capability, and address rules.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
