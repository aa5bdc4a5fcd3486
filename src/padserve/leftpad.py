# AUTOGENERATED! DO NOT EDIT! File to edit: pts/padserve/00_leftpad.pct.py

# %% pts/padserve/00_leftpad.pct.py 3
DEFAULT_WIDTH = 25
DEFAULT_PAD_CHAR = " "

# %% pts/padserve/00_leftpad.pct.py 4
def left_pad(text: str, width: int = DEFAULT_WIDTH, pad_char: str = DEFAULT_PAD_CHAR) -> str:
    """Left-pad *text* with *pad_char* to at least *width* characters.

    Raises ``ValueError`` if *pad_char* is not exactly one character.
    """
    if len(pad_char) != 1:
        raise ValueError(f"pad_char must be a single character, got {pad_char!r}")
    missing = width - len(text)
    if missing <= 0:
        return text
    return pad_char * missing + text
