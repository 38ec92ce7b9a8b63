"""Settings for the command-line issuer."""
