"""
Application layer: services consumed by the HTTP surface and AI grounding logic.
"""
