"""
Core domain logic: document processing pipeline and exception hierarchy.
"""
