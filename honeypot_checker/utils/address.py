"""Solana address validation utilities."""

from solders.pubkey import Pubkey

from honeypot_checker.core.exceptions import ValidationError

# System Program id; accounts it owns have no program-level owner
SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"


def parse_address(address: str) -> Pubkey:
    """Return the Pubkey for address (base58, 32 bytes) or raise ValidationError."""
    if not isinstance(address, str) or not address.strip():
        raise ValidationError("address must be a non-empty string")
    try:
        return Pubkey.from_string(address.strip())
    except Exception as e:
        raise ValidationError(f"Invalid Solana address: {address}") from e
