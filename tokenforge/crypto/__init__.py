"""Claim building, key parsing, and token signing."""
