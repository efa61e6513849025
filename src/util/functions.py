from pydantic import SecretStr

_UTF16 = "utf-16-le"


def mask_secret(secret: str | SecretStr | None = None, mask: str = "*") -> str | None:
    if secret is None:
        return None
    # extract the secret value
    if isinstance(secret, SecretStr):
        secret = secret.get_secret_value()
    # short strings: mask all
    if len(secret) <= 4:
        return mask * len(secret)
    # medium strings: show one char on each side
    if len(secret) <= 8:
        return secret[0] + (mask * (len(secret) - 2)) + secret[-1:]
    # long strings: show 3 chars on each end with 5 masks in the middle
    return secret[:3] + (mask * 5) + secret[-3:]


def utf16_length(text: str) -> int:
    return len(text.encode(_UTF16)) // 2


def utf16_slice(text: str, start: int, end: int | None = None) -> str:
    """
    Slices the text using UTF-16 code unit positions, the way Telegram measures entity spans.

    Raises UnicodeDecodeError if a boundary splits a surrogate pair.
    """
    encoded = text.encode(_UTF16)
    end_byte = len(encoded) if end is None else end * 2
    return encoded[start * 2:end_byte].decode(_UTF16, errors = "strict")
