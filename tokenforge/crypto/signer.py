"""Compact token assembly and signing for HS256 and RS256."""

import logging

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from jwt.algorithms import HMACAlgorithm, RSAAlgorithm

from tokenforge.crypto.encoding import base64url_encode, encode_json_segment
from tokenforge.crypto.errors import SigningFailed
from tokenforge.crypto.keys import hmac_secret, load_rsa_private_key
from tokenforge.crypto.types import ClaimSet, SigningAlgorithm

logger = logging.getLogger(__name__)

TOKEN_TYPE = "JWT"

_hs256 = HMACAlgorithm(HMACAlgorithm.SHA256)
_rs256 = RSAAlgorithm(RSAAlgorithm.SHA256)


def _prepare_key(
    algorithm: SigningAlgorithm, key_material: bytes | str
) -> bytes | RSAPrivateKey:
    """Load the key fully before any signing starts."""
    encoding = algorithm.key_encoding
    if encoding is None:
        return hmac_secret(key_material)
    return load_rsa_private_key(key_material, encoding)


def _sign(
    algorithm: SigningAlgorithm, signing_input: bytes, key: bytes | RSAPrivateKey
) -> bytes:
    try:
        if isinstance(key, RSAPrivateKey):
            return _rs256.sign(signing_input, key)
        return _hs256.sign(signing_input, key)
    except Exception as exc:
        raise SigningFailed(f"{algorithm.jws_name} signing failed") from exc


def issue_token(
    algorithm: SigningAlgorithm | str,
    key_material: bytes | str,
    claims: ClaimSet,
) -> str:
    """Build and sign a compact ``header.payload.signature`` token.

    ``key_material`` is the raw shared secret for HS256 or PEM text for the
    RS256 choices. Raises UnsupportedAlgorithm, InvalidKey or SigningFailed;
    a token is only returned once every step has succeeded.
    """
    alg = SigningAlgorithm.parse(algorithm)
    key = _prepare_key(alg, key_material)

    header = {"alg": alg.jws_name, "typ": TOKEN_TYPE}
    signing_input = (
        f"{encode_json_segment(header)}.{encode_json_segment(claims.to_payload())}"
    )
    logger.debug("Signing %s token for subject %r", alg, claims.subject)

    signature = _sign(alg, signing_input.encode("ascii"), key)
    return f"{signing_input}.{base64url_encode(signature)}"
