"""HTTP surface for knowledge base retrieval and management."""
