"""
Utility modules for Quake Map Creator.

This package contains utility functions and helpers used throughout the application.

Modules:
    logger: Logging configuration and setup
    basemap_helpers: Basemap tile layer configuration
    html_generators: Error banner and title box HTML
    popup_formatters: Popup value formatting utilities
"""

__version__ = '1.0.0'
