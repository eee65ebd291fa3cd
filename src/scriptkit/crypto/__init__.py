"""
Crypto — toy-шифры и хеши (НЕ для защиты данных).
"""

from scriptkit.crypto.toy_ciphers import (
    DJB2_MASK,
    SUBSTITUTION_ALPHABET,
    base64_decode,
    base64_encode,
    caesar_shift,
    djb2_hash,
    rot13,
    substitution_decrypt,
    substitution_encrypt,
    substitution_key,
    xor_bytes,
    xor_decrypt,
    xor_encrypt,
)

__all__ = [
    "DJB2_MASK",
    "SUBSTITUTION_ALPHABET",
    "base64_decode",
    "base64_encode",
    "caesar_shift",
    "djb2_hash",
    "rot13",
    "substitution_decrypt",
    "substitution_encrypt",
    "substitution_key",
    "xor_bytes",
    "xor_decrypt",
    "xor_encrypt",
]
