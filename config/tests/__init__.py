"""
Tests for the `config` package.
"""
