# ---
# jupyter:
#   kernelspec:
#     display_name: .venv
#     language: python
#     name: python3
# ---

# %%
#|default_exp leftpad

# %%
#|hide
from nblite import nbl_export; nbl_export();

# %% [markdown]
# # Left Padding
#
# Prepend a pad character until a string reaches a minimum width.
# Strings that are already wide enough come back unchanged.

# %%
#|export
DEFAULT_WIDTH = 25
DEFAULT_PAD_CHAR = " "

# %%
#|export
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

# %% [markdown]
# The fixture's greeting:

# %%
left_pad("hello yarn berry")
