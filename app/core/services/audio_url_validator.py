"""
Audio URL business rules and validation.
Domain-level constants that decide which links are accepted as audio sources.
"""
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError


class AudioUrlConstraints:
    """
    Business rules for audio links attached to cards.
    These are domain rules that remain constant across environments.
    """

    ALLOWED_SCHEMES = ("http", "https")
    ALLOWED_AUDIO_EXTENSIONS = (".mp3", ".wav", ".flac", ".aac", ".ogg", ".m4a")

    @classmethod
    def is_allowed_scheme(cls, scheme: str) -> bool:
        """Check if URL scheme is allowed."""
        return scheme.lower() in cls.ALLOWED_SCHEMES

    @classmethod
    def has_audio_extension(cls, path: str) -> bool:
        """Check if a URL path names a supported audio file."""
        return path.lower().endswith(cls.ALLOWED_AUDIO_EXTENSIONS)


_url_adapter = TypeAdapter(AnyHttpUrl)


def validate_audio_url(url: str) -> bool:
    """
    Check that url is an absolute http(s) link to a supported audio file.

    Purely syntactic: no network access and no content-type sniffing.

    Args:
        url: Candidate audio URL

    Returns:
        True if the URL parses, uses http or https, and its path ends
        with an allowed audio extension
    """
    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError:
        return False

    if not AudioUrlConstraints.is_allowed_scheme(parsed.scheme):
        return False

    return AudioUrlConstraints.has_audio_extension(parsed.path or "")
