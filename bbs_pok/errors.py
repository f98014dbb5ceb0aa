"""
Error kinds raised by construction-time operations.

Verification never raises one of these for a cryptographic mismatch; it
returns ``False``. They signal malformed requests instead.
"""


class BbsError(ValueError):
    """Base class for all bbs_pok errors."""


class MismatchedLengths(BbsError):
    """Fewer message generators than messages."""


class DegenerateKey(BbsError):
    """A key or signing exponent collapsed to zero."""


class InvalidEncoding(BbsError):
    """Bytes that do not decode to a valid scalar or group element."""


class BuilderMisuse(BbsError):
    """A proof builder or prover session used out of order."""
