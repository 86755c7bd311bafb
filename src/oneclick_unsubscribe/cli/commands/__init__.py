"""
Click command modules.
"""
