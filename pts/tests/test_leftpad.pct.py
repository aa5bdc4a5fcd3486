# ---
# jupyter:
#   kernelspec:
#     display_name: .venv
#     language: python
#     name: python3
# ---

# %%
#|default_exp test_leftpad

# %%
#|hide
from nblite import nbl_export; nbl_export();

# %% [markdown]
# # Left Padding Tests

# %%
#|export
import pytest

from padserve.leftpad import DEFAULT_WIDTH, left_pad

# %%
#|export
def test_pads_greeting_to_default_width():
    """The fixture greeting gets nine leading spaces."""
    result = left_pad("hello yarn berry")
    assert result == "         hello yarn berry"
    assert len(result) == DEFAULT_WIDTH == 25

# %%
#|export
def test_long_string_unchanged():
    """Strings longer than the width come back as-is."""
    s = "this string is definitely longer than 25"
    assert left_pad(s, 25) == s

# %%
#|export
def test_exact_width_unchanged():
    s = "x" * 25
    assert left_pad(s, 25) == s

# %%
#|export
def test_idempotent():
    """Padding an already padded string is a no-op."""
    once = left_pad("hello yarn berry", 25)
    assert left_pad(once, 25) == once

# %%
#|export
@pytest.mark.parametrize("width", [0, -5])
def test_non_positive_width(width):
    assert left_pad("abc", width) == "abc"

# %%
#|export
def test_empty_string():
    assert left_pad("", 3) == "   "

# %%
#|export
def test_custom_pad_char():
    assert left_pad("7", 3, "0") == "007"

# %%
#|export
def test_multi_char_pad_rejected():
    with pytest.raises(ValueError, match="single character"):
        left_pad("abc", 10, "ab")
