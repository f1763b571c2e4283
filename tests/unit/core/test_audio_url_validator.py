"""
Unit tests for audio URL validation rules.
"""
import pytest

from app.core.services.audio_url_validator import AudioUrlConstraints, validate_audio_url


@pytest.mark.unit
@pytest.mark.parametrize("url", [
    "https://x.test/a.mp3",
    "http://x.test/a.wav",
    "https://x.test/path/to/track.flac",
    "https://x.test/a.aac",
    "https://x.test/a.ogg",
    "https://x.test/a.m4a",
    "https://x.test/A.MP3",
    "HTTPS://x.test/a.mp3",
    "https://x.test/a.mp3?token=abc#t=10",
    "http://localhost:8080/files/a.mp3",
])
def test_valid_audio_urls(url):
    assert validate_audio_url(url) is True


@pytest.mark.unit
@pytest.mark.parametrize("url", [
    "ftp://x.test/a.mp3",
    "file:///tmp/a.mp3",
    "https://x.test/a.txt",
    "https://x.test/a.mp3.html",
    "https://x.test/",
    "https://x.test",
    "https://x.test/download?file=a.mp3",
    "not a url",
    "x.test/a.mp3",
    "",
])
def test_invalid_audio_urls(url):
    assert validate_audio_url(url) is False


@pytest.mark.unit
class TestAudioUrlConstraints:
    """Test cases for audio URL business rules."""

    def test_allowed_schemes(self):
        assert AudioUrlConstraints.is_allowed_scheme("https")
        assert AudioUrlConstraints.is_allowed_scheme("HTTP")
        assert not AudioUrlConstraints.is_allowed_scheme("ftp")

    def test_extension_allow_list(self):
        assert AudioUrlConstraints.ALLOWED_AUDIO_EXTENSIONS == (
            ".mp3", ".wav", ".flac", ".aac", ".ogg", ".m4a"
        )
        assert AudioUrlConstraints.has_audio_extension("/Songs/Track.M4A")
        assert not AudioUrlConstraints.has_audio_extension("/songs/track.webm")
