"""Display metadata attached to each transcript.

Gemini returns text only, so these values are placeholders chosen at random
on every request. They are not measured from the video.
"""

import random

DURATIONS = ("12:34", "8:42", "15:17", "6:23", "11:08")
LANGUAGES = ("English", "Spanish", "French", "German", "Italian")
CONFIDENCE_SCORES = ("94%", "96%", "92%", "98%", "95%")


def random_metadata(rng: random.Random | None = None) -> dict[str, str]:
    """Pick duration, language and confidence independently of each other."""
    rng = rng or random
    return {
        "duration": rng.choice(DURATIONS),
        "language": rng.choice(LANGUAGES),
        "confidence": rng.choice(CONFIDENCE_SCORES),
    }
