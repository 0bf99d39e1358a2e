# Earth model
EARTH_RADIUS_M = 6371000.0
METERS_PER_DEG_LAT = 111320.0  # flat tangent-plane scale, small parcels only

# Units
FT2_PER_M2 = 10.7639
FT_PER_M = 3.28084
M_PER_KM = 1000.0
FT_PER_MILE = 5280.0

# Rounding applied to reported measurements
MEASURE_DECIMALS = 2

# Quote defaults (original app prices in AUD)
CURRENCY_SYMBOL = "$"
CURRENCY_CODE = "AUD"
DEFAULT_MOBILIZATION_FEE = 200.0

# Geocoding (Nominatim-compatible search endpoint)
GEOCODE_URL = "https://nominatim.openstreetmap.org/search"
GEOCODE_COUNTRY = "au"
GEOCODE_LIMIT = 5

# HTTP
DEFAULT_TIMEOUT = 20  # seconds
USER_AGENT = "sitequote/1.0"
