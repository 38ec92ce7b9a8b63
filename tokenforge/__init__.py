"""Compact signed-token issuance (HS256 / RS256)."""
