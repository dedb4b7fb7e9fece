"""
Routes package for the Task Manager application.

This package contains route blueprints:
- api: JSON endpoints for programmatic access
- views: HTML page routes for the web interface
"""
