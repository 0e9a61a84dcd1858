"""Application Layer.

Infrastructure adapters that sit around the domain logic.
This layer handles output streams and other side effects.
"""
