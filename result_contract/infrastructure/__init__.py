"""
Infrastructure layer - cross-cutting adapters for result-contract.
"""
