import time, requests
from .config import (
    GEOCODE_URL, GEOCODE_COUNTRY, GEOCODE_LIMIT,
    DEFAULT_TIMEOUT, USER_AGENT,
)
from .geo import make_point

_session = requests.Session()
_session.headers.update({"User-Agent": USER_AGENT})
_base_headers = {"Accept": "application/json"}

def _retry(fn, tries=4, backoff=1.6):
    last = None
    for i in range(tries):
        try:
            return fn()
        except requests.RequestException as e:
            last = e
            if i == tries-1: raise
            print(f"[GIS] request failed ({e}); retry {i+1}/{tries-1}")
            time.sleep(backoff*(i+1))
    raise last

def _t_get(url, params):
    params = {"format": "jsonv2", **params}
    r = _retry(lambda: _session.get(url, params=params, headers=_base_headers, timeout=DEFAULT_TIMEOUT))
    r.raise_for_status()
    js = r.json()
    if isinstance(js, dict) and "error" in js: raise RuntimeError(js["error"])
    return js

# -----------------------------
# Address lookups
# -----------------------------
def search_address(query: str, country=GEOCODE_COUNTRY, limit=GEOCODE_LIMIT):
    """Candidate matches for a free-text address: list of (label, GeoPoint)."""
    query = (query or "").strip()
    if len(query) < 3:
        return []
    params = {"q": query, "limit": limit, "addressdetails": 0}
    if country:
        params["countrycodes"] = country
    hits = _t_get(GEOCODE_URL, params)
    out = []
    for h in hits:
        try:
            out.append((h.get("display_name", query), make_point(h["lat"], h["lon"])))
        except (KeyError, ValueError) as e:
            print(f"[GIS] skipping malformed geocoder hit: {e}")
    return out

def geocode_address(address: str, country=GEOCODE_COUNTRY):
    # Expect "1 Collins St, Melbourne VIC"
    if not address or not address.strip():
        raise RuntimeError("Address is empty")
    hits = search_address(address, country=country, limit=1)
    if not hits:
        raise RuntimeError(f"Address not found: {address}")
    label, pt = hits[0]
    print(f"[GIS] Geocoded '{address}' -> {pt.lat:.6f}, {pt.lng:.6f}")
    return label, pt
