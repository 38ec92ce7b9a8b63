"""Key material loading for HMAC secrets and RSA private keys."""

from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm as CryptoUnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from jwt.algorithms import HMACAlgorithm
from jwt.exceptions import InvalidKeyError

from tokenforge.crypto.errors import InvalidKey
from tokenforge.crypto.types import PrivateKeyEncoding

_PEM_LABELS = {
    PrivateKeyEncoding.PKCS1: "RSA PRIVATE KEY",
    PrivateKeyEncoding.PKCS8: "PRIVATE KEY",
}

_hmac = HMACAlgorithm(HMACAlgorithm.SHA256)


def _as_bytes(key_material: bytes | str) -> bytes:
    if isinstance(key_material, str):
        try:
            return key_material.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidKey("Key material is not valid UTF-8 text") from exc
    return key_material


def load_rsa_private_key(
    pem: bytes | str, encoding: PrivateKeyEncoding
) -> RSAPrivateKey:
    """Parse an unencrypted RSA private key, accepting only ``encoding``."""
    data = _as_bytes(pem)
    label = _PEM_LABELS[encoding]
    begin = f"-----BEGIN {label}-----".encode("ascii")
    end = f"-----END {label}-----".encode("ascii")
    if begin not in data or end not in data:
        raise InvalidKey(f"Key is not a {encoding} PEM private key")

    try:
        loaded = serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError, CryptoUnsupportedAlgorithm) as exc:
        raise InvalidKey(f"Could not parse {encoding} private key") from exc
    if not isinstance(loaded, RSAPrivateKey):
        raise InvalidKey(f"{encoding} key is not an RSA private key")
    return loaded


def hmac_secret(key_material: bytes | str) -> bytes:
    """Return the raw HMAC secret, rejecting empty and asymmetric material."""
    data = _as_bytes(key_material)
    if not data:
        raise InvalidKey("HMAC secret must not be empty")
    try:
        return _hmac.prepare_key(data)
    except InvalidKeyError as exc:
        raise InvalidKey(str(exc)) from exc


def read_key_file(path: str | Path) -> bytes:
    """Read key bytes from disk in a single scoped access."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise InvalidKey(f"Cannot read key file {path}: {exc.strerror}") from exc
