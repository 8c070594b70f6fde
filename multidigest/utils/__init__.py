"""
Shared utilities for multidigest.
"""
