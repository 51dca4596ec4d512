"""Default endpoints and client identification."""

YR_BASE_URL = "https://api.met.no/weatherapi/locationforecast/2.0/compact?"
SUNRISE_BASE_URL = "https://api.met.no/weatherapi/sunrise/3.0"
GEONAMES_BASE_URL = "http://api.geonames.org/searchJSON"

# met.no rejects requests without an identifying User-Agent
DEFAULT_USER_AGENT = "yrweather/0.1.0 (+https://github.com/yrweather/yrweather)"

DEFAULT_BACKEND = "yr"
DEFAULT_DAYS = 3
