PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
REPLACEMENT = "****"


def clean_body(body: str, banned=PROFANE_WORDS) -> str:
    """Mask banned words. Matching is per space-separated word and case-insensitive,
    so punctuation attached to a word ("fornax!") keeps it unmasked.
    """
    words = body.split(" ")
    return " ".join(REPLACEMENT if w.lower() in banned else w for w in words)
