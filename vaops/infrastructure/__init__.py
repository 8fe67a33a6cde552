"""
Infrastructure layer: persistence, identity, rendering and web adapters.
"""
