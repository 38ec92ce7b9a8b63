"""Command-line token issuer.

Usage:
    tokenforge-issue --sub alice --aud api --claim role=admin
    tokenforge-issue --alg RS256-PKCS#8 --sub alice --key-file key.pem
"""

import argparse
import getpass
import logging
import sys

from pydantic import ValidationError

from tokenforge.core.settings import IssuerSettings
from tokenforge.crypto.claims import build_claims
from tokenforge.crypto.errors import TokenError
from tokenforge.crypto.keys import read_key_file
from tokenforge.crypto.signer import issue_token
from tokenforge.crypto.types import SigningAlgorithm

EXIT_CODE_TOKEN_ERROR = 2
EXIT_CODE_CONFIG_ERROR = 2


def _parse_claim(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    return name, value


def build_parser(settings: IssuerSettings) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from settings."""
    parser = argparse.ArgumentParser(description="Issue a signed compact token")
    parser.add_argument(
        "--alg",
        default=settings.algorithm,
        help=f"One of: {', '.join(a.value for a in SigningAlgorithm)}",
    )
    parser.add_argument("--sub", required=True, help="Token subject")
    parser.add_argument("--iss", default=settings.issuer, help="Token issuer")
    parser.add_argument("--aud", default=settings.audience, help="Token audience")
    parser.add_argument(
        "--ttl", type=int, default=settings.token_ttl, help="Lifetime in seconds"
    )
    parser.add_argument(
        "--claim",
        action="append",
        type=_parse_claim,
        default=[],
        metavar="KEY=VALUE",
        help="Extra string claim (repeatable)",
    )
    parser.add_argument(
        "--key-file",
        help="PEM private key for RS256, or secret file for HS256",
    )
    return parser


def _acquire_key(alg: SigningAlgorithm, key_file: str | None) -> bytes | str:
    if key_file:
        data = read_key_file(key_file)
        if alg.key_encoding is None:
            return data.rstrip(b"\r\n")
        return data
    if alg.key_encoding is not None:
        raise TokenError(f"{alg} requires --key-file")
    return getpass.getpass("HMAC secret: ")


def _load_settings() -> IssuerSettings:
    try:
        return IssuerSettings()
    except ValidationError as exc:
        fields = ", ".join(
            f"TOKENFORGE_{str(err['loc'][0]).upper()}" for err in exc.errors()
        )
        print(f"Error: invalid configuration in {fields}", file=sys.stderr)
        sys.exit(EXIT_CODE_CONFIG_ERROR)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, issue one token and print it to stdout."""
    settings = _load_settings()
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    try:
        alg = SigningAlgorithm.parse(args.alg)
        key = _acquire_key(alg, args.key_file)
        claims = build_claims(
            args.sub,
            args.iss,
            args.aud,
            args.ttl,
            dict(args.claim),
            not_before_skew_seconds=settings.not_before_skew,
        )
        token = issue_token(alg, key, claims)
    except TokenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_CODE_TOKEN_ERROR)

    print(token)


if __name__ == "__main__":
    main()
