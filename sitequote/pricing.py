"""
Service catalog and quote math.

Area services (sqm/sqft) price the traced area; linear services
(linear_m/linear_ft) price the traced length, which for a trail is the open
path and for an area is its perimeter.
"""
from typing import NamedTuple, Optional

from .config import DEFAULT_MOBILIZATION_FEE
from .geo import Measurements, measurements_for

LINEAR_UNITS = ("linear_m", "linear_ft")


class ServiceConfig(NamedTuple):
    id: str
    name: str
    price_per_m2: float
    price_per_ft2: float
    unit: str = "sqm"


SERVICES = [
    ServiceConfig("lawn_care", "Lawn Care", 2.5, 0.23),
    ServiceConfig("pressure_washing", "Pressure Washing", 8.0, 0.74),
    ServiceConfig("concreting", "Concreting", 85.0, 7.9),
    ServiceConfig("decking", "Decking", 250.0, 23.23),
    ServiceConfig("roofing", "Roofing", 65.0, 6.04),
    ServiceConfig("fencing", "Fencing", 120.0, 11.15, "linear_m"),
    ServiceConfig("landscaping", "Landscaping", 45.0, 4.18),
    ServiceConfig("paving", "Paving", 75.0, 6.97),
    ServiceConfig("pool_area", "Pool Area", 150.0, 13.94),
    ServiceConfig("custom", "Custom Service", 0.0, 0.0),
]
_BY_ID = {s.id: s for s in SERVICES}


class DrawnArea:
    """A traced shape on the map: an 'area' (closed) or a 'trail' (open)."""

    def __init__(self, id, points, kind="area", service_id=None,
                 price_per_unit=None, enabled=True):
        if kind not in ("area", "trail"):
            raise ValueError(f"Unknown shape kind: {kind!r}")
        self.id = id
        self.points = list(points)
        self.kind = kind
        self.service_id = service_id
        self.price_per_unit = price_per_unit
        self.enabled = enabled

    @property
    def measurements(self) -> Measurements:
        # recomputed on every access so edits to points never go stale
        return measurements_for(self.points, closed=(self.kind == "area"))

    @classmethod
    def from_dict(cls, d: dict):
        pts = [(p["lat"], p["lng"]) if isinstance(p, dict) else (p[0], p[1])
               for p in d.get("points", [])]
        return cls(
            id=d.get("id", ""),
            points=pts,
            kind=d.get("type", d.get("kind", "area")),
            service_id=d.get("serviceType", d.get("service_id")),
            price_per_unit=d.get("pricePerUnit", d.get("price_per_unit")),
            enabled=d.get("enabled", True),
        )


def get_service(service_id) -> Optional[ServiceConfig]:
    return _BY_ID.get(service_id)

def calculate_price(quantity: float, service: ServiceConfig, is_metric: bool = True) -> float:
    if is_metric:
        return quantity * service.price_per_m2
    return quantity * service.price_per_ft2

def area_quantity(m: Measurements, service: ServiceConfig, is_metric: bool = True) -> float:
    """Amount being priced: area or length, in the display unit system."""
    if service.unit in LINEAR_UNITS:
        return m.perimeter_m if is_metric else m.perimeter_ft
    return m.area_m2 if is_metric else m.area_ft2

def area_price(area: DrawnArea, is_metric: bool = True) -> float:
    if not area.service_id:
        return 0.0
    service = get_service(area.service_id)
    if service is None:
        return 0.0
    qty = area_quantity(area.measurements, service, is_metric)
    if area.price_per_unit is not None:
        return qty * float(area.price_per_unit)
    return calculate_price(qty, service, is_metric)

def build_quote(areas, address: str = "", mobilization_fee: float = DEFAULT_MOBILIZATION_FEE,
                is_metric: bool = True) -> dict:
    lines = []
    for idx, a in enumerate(areas, start=1):
        m = a.measurements
        service = get_service(a.service_id)
        lines.append({
            "id": a.id,
            "label": service.name if service else f"Area {idx}",
            "kind": a.kind,
            "enabled": a.enabled,
            "measurements": m._asdict(),
            "price": round(area_price(a, is_metric), 2) if a.enabled else 0.0,
        })
    subtotal = round(sum(ln["price"] for ln in lines), 2)
    return {
        "address": address,
        "units": "metric" if is_metric else "imperial",
        "areas": lines,
        "subtotal": subtotal,
        "mobilization": round(float(mobilization_fee), 2),
        "total": round(subtotal + float(mobilization_fee), 2),
    }
