"""
Reversible text encoding of a profile for share links.

A token is the profile's compact alias JSON in URL-safe base64 with the
padding stripped, so it can sit in a query string unescaped.
"""

import base64
import binascii

from pydantic import ValidationError

from planner.models.profile import Profile


class ShareCodecError(ValueError):
    """Raised when a share token cannot be decoded into a profile."""


def encode_profile(profile: Profile) -> str:
    """Encode a profile as a URL-safe share token."""
    payload = profile.model_dump_json(by_alias=True, exclude_none=True)
    token = base64.urlsafe_b64encode(payload.encode("utf-8"))
    return token.rstrip(b"=").decode("ascii")


def decode_profile(token: str) -> Profile:
    """
    Decode a share token back into a profile.

    Raises:
        ShareCodecError: If the token is not valid base64, not JSON, or does
            not describe a valid profile
    """
    padded = token.strip() + "=" * (-len(token.strip()) % 4)
    try:
        payload = base64.b64decode(padded, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as e:
        raise ShareCodecError(f"Share token is not valid base64: {e}") from e

    try:
        return Profile.model_validate_json(payload)
    except ValidationError as e:
        raise ShareCodecError(f"Share token does not describe a profile: {e}") from e
