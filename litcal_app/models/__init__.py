"""
Shared value types.
"""
