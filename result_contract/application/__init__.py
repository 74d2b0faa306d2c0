"""
Application layer - contract construction for result-contract.

This layer may import from the domain layer and config only.
"""
