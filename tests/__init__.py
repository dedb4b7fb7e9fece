"""
Test suite for the Task Manager application.

This package contains:
- unit/: Store, statistics, renderer, demo and dispatcher tests
- integration/: JSON API and HTML view tests through the Flask test client
- security/: Output-encoding checks for user-supplied task text
"""
