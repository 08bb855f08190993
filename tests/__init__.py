"""
Test suite for AI Megarepo.

This package contains all tests organized by component:
- test_providers/: Tests for the hosted provider facades
- test_local_models/: Tests for the TensorFlow regression helper
"""
