import base64
import binascii

from player_state_service.processor.errors import DecodeError


def decode(text: str) -> bytes:
    """ Decodes standard, padded base64 text into the raw player state bytes.

    Only the canonical encoding is accepted: characters outside the base64
    alphabet, missing or misplaced padding, whitespace and non-zero trailing
    bits all fail.

    Args:
        text (str): base64 text taken from the request envelope.

    Raises:
        DecodeError: the text is not canonical padded base64.

    Returns:
        bytes: the decoded bytes, never a partial result.
    """
    try:
        encoded = text.encode("ascii")
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError("Invalid Base64 data") from exc

    if base64.b64encode(raw) != encoded:
        raise DecodeError("Invalid Base64 data")

    return raw


def encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")
