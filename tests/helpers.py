"""Constants and builders shared by the test modules."""

VALID_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def gemini_body(text: str) -> dict:
    """Minimal successful generateContent response."""
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
            }
        ]
    }
