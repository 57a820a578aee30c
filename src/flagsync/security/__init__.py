"""Security – symmetric request signatures."""
from flagsync.security.signature import SIGNATURE_HEADER, SignatureAuthority

__all__ = ["SIGNATURE_HEADER", "SignatureAuthority"]
