"""
Saloon Shootout: a tap-to-shoot western shooting gallery.
"""

__version__ = "1.0.0"
