# AUTOGENERATED! DO NOT EDIT! File to edit: pts/padserve/06_main.pct.py

# %% pts/padserve/06_main.pct.py 3
from padserve.cli import app

# %% pts/padserve/06_main.pct.py 4
app(prog_name="padserve")
