"""Text sanitizer: swaps em-dashes for spaces in pasted prose."""

EM_DASH = "—"


def remove_em_dashes(text: str) -> str:
    """Replace every em-dash with a single space. Hyphens and en-dashes stay."""
    return text.replace(EM_DASH, " ")


def sanitize_text(text: str) -> str:
    """Validate *text* is non-blank and return it without em-dashes."""
    if not text or not text.strip():
        raise ValueError("Please enter text to sanitize")
    return remove_em_dashes(text)


__all__ = ["EM_DASH", "remove_em_dashes", "sanitize_text"]
