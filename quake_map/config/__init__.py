"""
Configuration package for Quake Map Creator.

This package contains configuration loading and validation.

Modules:
    config_loader: Load and validate feed and map configuration from JSON
"""

__version__ = '1.0.0'
