# ---
# jupyter:
#   kernelspec:
#     display_name: .venv
#     language: python
#     name: python3
# ---

# %%
#|default_exp probe

# %%
#|hide
from nblite import nbl_export; nbl_export();

# %% [markdown]
# # Probing
#
# Check that a running instance is available and serves the greeting.
# This is the check an integration harness runs against the started app.

# %%
#|export
import time
from dataclasses import dataclass

import requests

from padserve.config import DEFAULT_GREETING, DEFAULT_PORT

# %% [markdown]
# ## Data model

# %%
#|export
@dataclass
class ProbeResult:
    url: str
    ok: bool
    status: int | None = None
    body: str = ""
    error: str | None = None

# %% [markdown]
# ## probe

# %%
#|export
def default_url(port: int = DEFAULT_PORT) -> str:
    return f"http://127.0.0.1:{port}/"

# %%
#|export
def probe(url: str, expect: str = DEFAULT_GREETING, timeout: float = 2.0) -> ProbeResult:
    """Make one GET request; ok if status is 200 and the body contains *expect*."""
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        return ProbeResult(url=url, ok=False, error=str(e))

    if resp.status_code != 200:
        return ProbeResult(url=url, ok=False, status=resp.status_code, body=resp.text,
                           error=f"Expected status 200, got {resp.status_code}")
    if expect not in resp.text:
        return ProbeResult(url=url, ok=False, status=resp.status_code, body=resp.text,
                           error=f"Response body does not contain {expect!r}")
    return ProbeResult(url=url, ok=True, status=resp.status_code, body=resp.text)

# %%
#|export
def wait_for_server(url: str, expect: str = DEFAULT_GREETING, deadline: float = 10.0,
                    interval: float = 0.1, timeout: float = 1.0) -> ProbeResult:
    """Probe repeatedly until success or *deadline* seconds have passed.

    Each attempt uses *timeout* as its request timeout.

    Returns the last ``ProbeResult``.
    """
    end = time.monotonic() + deadline
    while True:
        result = probe(url, expect=expect, timeout=timeout)
        if result.ok or time.monotonic() >= end:
            return result
        time.sleep(interval)
