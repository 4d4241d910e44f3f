"""
Tests for the Baby language.
"""
