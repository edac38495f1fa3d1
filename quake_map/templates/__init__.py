"""
HTML templates for Quake Map Creator.

This package contains Jinja2 templates for generating map UI elements.

Templates:
    legend.html: Earthquake depth legend
"""

__version__ = '1.0.0'
