from urllib.parse import urlparse

DEFAULT_SCHEME = "https"


def normalize_url(address: str) -> str:
    """
    Turn a bare host into a full address.

    "example.com/docs" -> "https://example.com/docs". Addresses that already
    carry a scheme are only stripped of surrounding whitespace.
    """
    address = address.strip()
    if not address:
        return address

    parsed = urlparse(address)
    if parsed.scheme and (parsed.netloc or parsed.scheme in ("mailto", "tel")):
        return address

    return f"{DEFAULT_SCHEME}://{address.lstrip('/')}"
