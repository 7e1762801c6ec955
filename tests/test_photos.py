"""Tests for proof photo encoding."""

import pytest

from custody_scan.services.photos import to_data_url


@pytest.mark.parametrize(
    ("payload", "prefix"),
    [
        (b"\xff\xd8\xff\xe0data", "data:image/jpeg;base64,"),
        (b"\x89PNG\r\n\x1a\ndata", "data:image/png;base64,"),
        (b"RIFF\x00\x00\x00\x00WEBPdata", "data:image/webp;base64,"),
        (b"unknown", "data:image/jpeg;base64,"),
    ],
)
def test_to_data_url_detects_mime(payload: bytes, prefix: str) -> None:
    assert to_data_url(payload).startswith(prefix)


def test_to_data_url_rejects_empty() -> None:
    with pytest.raises(ValueError):
        to_data_url(b"")
