"""
Integration test package for the Task Manager.

Tests use the Flask test client and cover:
- JSON API status codes and payloads
- Form posts and the rendered task list page
- Clear-all confirmation flow
"""
