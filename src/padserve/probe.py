# AUTOGENERATED! DO NOT EDIT! File to edit: pts/padserve/04_probe.pct.py

# %% pts/padserve/04_probe.pct.py 3
import time
from dataclasses import dataclass

import requests

from padserve.config import DEFAULT_GREETING, DEFAULT_PORT

# %% pts/padserve/04_probe.pct.py 5
@dataclass
class ProbeResult:
    url: str
    ok: bool
    status: int | None = None
    body: str = ""
    error: str | None = None

# %% pts/padserve/04_probe.pct.py 7
def default_url(port: int = DEFAULT_PORT) -> str:
    return f"http://127.0.0.1:{port}/"

# %% pts/padserve/04_probe.pct.py 8
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

# %% pts/padserve/04_probe.pct.py 9
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
