# ---
# jupyter:
#   kernelspec:
#     display_name: .venv
#     language: python
#     name: python3
# ---

# %%
#|default_exp __main__

# %%
#|hide
from nblite import nbl_export; nbl_export();

# %% [markdown]
# # Module Entry Point
#
# `python -m padserve` runs the same typer app as the `padserve` script.

# %%
#|export
from padserve.cli import app

# %%
#|export
app(prog_name="padserve")
