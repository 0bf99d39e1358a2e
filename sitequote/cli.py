import argparse, json
from tabulate import tabulate

from .config import DEFAULT_MOBILIZATION_FEE
from .fmt import format_area, format_distance, format_currency
from .gis import geocode_address
from .pricing import DrawnArea, SERVICES, build_quote


def parse_points(text):
    """'lat,lng;lat,lng;...' -> list of (lat, lng) floats."""
    pts = []
    for chunk in text.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = chunk.split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected 'lat,lng', got '{chunk}'")
        pts.append((float(parts[0]), float(parts[1])))
    return pts

def load_areas(path, kind="area", service_id=None, price_per_unit=None):
    """
    Shapes from a JSON file: a bare point list, or {"areas": [...]} of shapes.

    kind/service_id/price_per_unit apply to a bare point list only; an
    {"areas": [...]} file carries its own and rejects them.
    Raises ValueError for unreadable or malformed files.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            js = json.load(fh)
    except OSError as e:
        raise ValueError(f"Cannot read shape file {path}: {e.strerror or e}")
    try:
        if isinstance(js, dict) and "areas" in js:
            if kind != "area" or service_id or price_per_unit is not None:
                raise ValueError("--trail/--service/--price only apply to a bare point list; "
                                 "set them per shape in the \"areas\" file")
            return [DrawnArea.from_dict(d) for d in js["areas"]], js.get("address", "")
        if isinstance(js, list):
            return [DrawnArea("area-1", DrawnArea.from_dict({"points": js}).points, kind=kind,
                              service_id=service_id, price_per_unit=price_per_unit)], ""
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed shape file {path}: bad point or shape entry ({e!r})")
    raise ValueError(f"Unrecognised shape file layout: {path}")

def compute_summary(areas, address="", mobilization_fee=DEFAULT_MOBILIZATION_FEE,
                    is_metric=True, verbose=False):
    # --- geocode only to confirm the site; measurements come from the points ---
    location = None
    if address:
        label, pt = geocode_address(address)
        location = {"label": label, "lat": pt.lat, "lng": pt.lng}

    quote = build_quote(areas, address=address, mobilization_fee=mobilization_fee,
                        is_metric=is_metric)
    quote["location"] = location

    if verbose:
        for a in areas:
            print(f"[CLI] {a.id}: {len(a.points)} points ({a.kind})")
        empty = [ln["id"] for ln in quote["areas"] if ln["measurements"]["area_m2"] == 0 and ln["kind"] == "area"]
        if empty:
            print(f"[CLI] WARNING: zero area for {', '.join(empty)} (fewer than 3 points or collinear).")
    return quote

def pretty_print(quote):
    metric = quote["units"] == "metric"
    rows = []
    for ln in quote["areas"]:
        m = ln["measurements"]
        area = m["area_m2"] if metric else m["area_ft2"]
        length = m["perimeter_m"] if metric else m["perimeter_ft"]
        rows.append([
            ln["label"] + ("" if ln["enabled"] else " (off)"),
            ln["kind"],
            format_area(area, metric) if ln["kind"] == "area" else "—",
            format_distance(length, metric),
            format_currency(ln["price"]),
        ])
    if quote.get("location"):
        print(f"Site: {quote['location']['label']}")
    print(tabulate(rows, headers=["Item", "Type", "Area", "Length", "Price"], tablefmt="fancy_grid"))
    totals = [
        ["Subtotal", format_currency(quote["subtotal"])],
        ["Mobilization", format_currency(quote["mobilization"])],
        ["Total", format_currency(quote["total"])],
    ]
    print(tabulate(totals, tablefmt="fancy_grid"))

def main(argv=None):
    p = argparse.ArgumentParser(description="Measure traced shapes and price a site quote")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--points", help="Vertices as 'lat,lng;lat,lng;...'")
    g.add_argument("--file", help="JSON file with a point list or {\"areas\": [...]}")
    p.add_argument("--trail", action="store_true", help="Treat --points as an open trail, not a closed area")
    p.add_argument("--service", choices=[s.id for s in SERVICES], help="Service to price --points with")
    p.add_argument("--price", type=float, help="Override price per unit")
    p.add_argument("--mobilization", type=float, default=DEFAULT_MOBILIZATION_FEE, help="Mobilization fee")
    p.add_argument("--imperial", action="store_true", help="Report and price in feet")
    p.add_argument("--address", help="Site address to geocode (e.g., '1 Collins St, Melbourne VIC')")
    p.add_argument("--format", choices=["table", "json"], default="table")
    p.add_argument("-v", "--verbose", action="store_true", help="Print extra diagnostics")
    args = p.parse_args(argv)

    address = args.address or ""
    kind = "trail" if args.trail else "area"
    try:
        if args.points:
            pts = parse_points(args.points)
            areas = [DrawnArea("area-1", pts, kind=kind,
                               service_id=args.service, price_per_unit=args.price)]
        else:
            areas, file_address = load_areas(args.file, kind=kind, service_id=args.service,
                                             price_per_unit=args.price)
            address = address or file_address
    except ValueError as e:
        p.error(str(e))

    try:
        quote = compute_summary(areas, address=address, mobilization_fee=args.mobilization,
                                is_metric=not args.imperial, verbose=args.verbose)
    except ValueError as e:
        p.error(str(e))
    except Exception:
        print("\n[CLI] FATAL:")
        raise

    if args.format == "json":
        print(json.dumps(quote, indent=2))
    else:
        pretty_print(quote)

if __name__ == "__main__":
    main()
