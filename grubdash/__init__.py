"""
GrubDash - in-memory dishes & orders API
"""

__version__ = '1.0.0'
