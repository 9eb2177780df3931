"""
Argument validation for the public calendar functions.
"""
