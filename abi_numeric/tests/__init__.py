"""
Tests for the `abi_numeric` package.
"""
