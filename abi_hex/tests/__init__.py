"""
Tests for the `abi_hex` package.
"""
