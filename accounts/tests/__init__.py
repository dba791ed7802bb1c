"""
Accounts App Tests

This package contains tests for:
- test_models.py: profiles, anonymous ids, viewer context
- test_api.py: candidate profile and completion endpoints
"""
