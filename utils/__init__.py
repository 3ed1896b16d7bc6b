"""
Shared helpers for logging and template rendering.
"""
