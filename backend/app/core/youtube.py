"""YouTube URL validation shared by the relay endpoint and the client."""

import re

# Accepts youtube.com/watch?v=<id>, /embed/<id>, /v/<id> and youtu.be/<id>,
# with optional scheme and www., plus at most one trailing "&param".
YOUTUBE_URL_PATTERN = re.compile(
    r"(https?://)?(www\.)?(youtube\.com/(watch\?v=|embed/|v/)|youtu\.be/)[\w-]+(&[\w=]*)?",
    re.ASCII,
)


def is_valid_youtube_url(url) -> bool:
    """Check whether `url` (surrounding whitespace ignored) is a YouTube URL."""
    if not isinstance(url, str):
        return False
    return YOUTUBE_URL_PATTERN.fullmatch(url.strip()) is not None
