"""
Boundary layer: persistence, AI providers, and document storage adapters.
"""
