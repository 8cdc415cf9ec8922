import os
import sys

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from greeter.app import HEALTH_BODY, HEALTH_PATH, read_port

PROBE_USER_AGENT = "greeter-probe/1.0"
PROBE_TIMEOUT_SECONDS = 5.0


def default_url(environ=os.environ) -> str:
    port = read_port(environ)
    return f"http://127.0.0.1:{port}{HEALTH_PATH}"


def build_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": PROBE_USER_AGENT})
    retry_policy = Retry(
        total=3,
        backoff_factor=0.5,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["HEAD", "GET", "OPTIONS"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry_policy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def probe(url: str, timeout: float = PROBE_TIMEOUT_SECONDS) -> bool:
    """GET the liveness endpoint; healthy means 200 with an exact "OK" body."""
    session = build_session()
    try:
        response = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        print(f"[probe] {url} unreachable: {e!r}")
        return False
    finally:
        session.close()

    if response.status_code != 200 or response.content != HEALTH_BODY:
        print(f"[probe] {url} unhealthy: {response.status_code} {response.text[:80]!r}")
        return False
    print(f"[probe] {url} healthy")
    return True


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    url = argv[0] if argv else default_url()
    return 0 if probe(url) else 1


if __name__ == "__main__":
    sys.exit(main())
