# Truncation heuristic for generated descriptions.

MIN_CONTINUATION_LENGTH = 240

# Closing punctuation or a closed markdown construct.
TERMINAL_CHARS = frozenset({".", "!", "?", '"', "”", ")", "]", "`", "*"})


def looks_truncated(text: str) -> bool:
    """Guess whether ``text`` was cut off mid-thought.

    Short outputs are always treated as complete. Longer ones count as
    finished only when they end on a terminal character.
    """
    trimmed = text.strip()
    if len(trimmed) < MIN_CONTINUATION_LENGTH:
        return False
    last = trimmed[-1]
    # A dangling "-", ":" or "," lands here too.
    return last not in TERMINAL_CHARS
