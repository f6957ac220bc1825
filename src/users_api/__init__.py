"""
In-memory User resource server
"""

__version__ = "1.0.0"
