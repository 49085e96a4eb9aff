"""
Boundary layer: adapters for the relational store, the embedding provider
and the in-memory vector index.
"""
