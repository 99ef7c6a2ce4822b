"""Content type detection from the leading bytes of an upload."""

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Only the first bytes of a file are inspected.
SNIFF_LENGTH = 512


def _is_mpeg_audio_frame(header: bytes) -> bool:
    # Frame sync is 11 set bits; layer bits 00 are reserved.
    return (
        len(header) >= 2
        and header[0] == 0xFF
        and header[1] & 0xE0 == 0xE0
        and header[1] & 0x06 != 0
    )


def _is_mp4(header: bytes) -> bool:
    if len(header) < 12 or header[4:8] != b"ftyp":
        return False
    box_size = int.from_bytes(header[0:4], "big")
    return box_size >= 12 and box_size % 4 == 0


def detect_content_type(data: bytes) -> str:
    """
    Detects the media type of an upload from its magic number.

    Recognizes MP3 (ID3 tag or a bare MPEG audio frame), MP4 (``ftyp`` box)
    and MPEG program or video streams. Anything else is reported as
    ``application/octet-stream``, so the declared type of a multipart part
    never decides what gets accepted.

    Args:
        data: The uploaded bytes, or at least their first few hundred bytes.

    Returns:
        The detected MIME type.
    """
    header = data[:SNIFF_LENGTH]

    if header.startswith(b"ID3") or _is_mpeg_audio_frame(header):
        return "audio/mpeg"
    if _is_mp4(header):
        return "video/mp4"
    if header.startswith((b"\x00\x00\x01\xba", b"\x00\x00\x01\xb3")):
        return "video/mpeg"
    return DEFAULT_CONTENT_TYPE
