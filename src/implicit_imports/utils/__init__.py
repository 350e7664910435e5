"""
Utility subpackage (console and logging helpers).
"""
