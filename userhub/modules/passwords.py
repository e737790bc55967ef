import os
import base64
from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

SCHEME = "scrypt"
SALT_BYTES = 16
KEY_LENGTH = 32
# scrypt cost parameters (n must be a power of two)
SCRYPT_N = 2 ** 14
SCRYPT_R = 8
SCRYPT_P = 1


def _kdf(salt: bytes) -> Scrypt:
    return Scrypt(salt=salt, length=KEY_LENGTH, n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P)


def _b64(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode()


def hash_password(plaintext: str) -> str:
    """
    Derives a scrypt hash of the password.
    Returns: 'scrypt$salt$digest' with salt and digest base64 encoded.
    """
    salt = os.urandom(SALT_BYTES)
    digest = _kdf(salt).derive(plaintext.encode("utf-8"))
    return f"{SCHEME}${_b64(salt)}${_b64(digest)}"


def verify_password(plaintext: str, stored: str) -> bool:
    """
    Checks a password against a value produced by hash_password().
    Anything that is not a well-formed hash never verifies.
    """
    if plaintext is None or not stored or stored.count("$") != 2:
        return False

    scheme, b64_salt, b64_digest = stored.split("$")
    if scheme != SCHEME:
        return False

    try:
        salt = base64.urlsafe_b64decode(b64_salt)
        digest = base64.urlsafe_b64decode(b64_digest)
    except ValueError:
        return False

    try:
        _kdf(salt).verify(plaintext.encode("utf-8"), digest)
    except InvalidKey:
        return False
    return True
