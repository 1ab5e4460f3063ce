"""Fuzz testing infrastructure for parsekit.

This package contains:
- test_json_depth_exhaustion: Boundary testing for nesting depth limits

Python 3.13+.
"""
