"""Errors raised while issuing a token."""


class TokenError(Exception):
    """Base class for token issuance failures."""


class UnsupportedAlgorithm(TokenError):
    """The requested algorithm is not one of the supported choices."""

    def __init__(self, choice: str) -> None:
        super().__init__(f"Unsupported signing algorithm: {choice!r}")
        self.choice = choice


class InvalidKey(TokenError):
    """Key material could not be loaded for the selected algorithm."""


class SigningFailed(TokenError):
    """The signature primitive could not complete."""
