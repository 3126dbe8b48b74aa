"""Ed25519 verification of inbound interaction webhooks (PyNaCl)."""

from typing import Optional

from nacl.exceptions import CryptoError
from nacl.signing import VerifyKey

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"


def verify_interaction(
    body: bytes,
    signature: Optional[str],
    timestamp: Optional[str],
    public_key: str,
) -> bool:
    """True iff ``signature`` signs ``timestamp + body`` under ``public_key``.

    Missing headers, an unset key and malformed hex all count as failures.
    """
    if not signature or not timestamp or not public_key:
        return False
    try:
        key = VerifyKey(bytes.fromhex(public_key))
        key.verify(timestamp.encode() + body, bytes.fromhex(signature))
    except (CryptoError, ValueError, TypeError):
        return False
    return True
