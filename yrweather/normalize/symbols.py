"""met.no symbol code to canonical weather category."""

from types import MappingProxyType

from yrweather.models.weather import WeatherCode

SYMBOL_CODES: MappingProxyType[str, WeatherCode] = MappingProxyType({
    "clearsky_night": WeatherCode.SUNNY,
    "clearsky_day": WeatherCode.SUNNY,
    "cloudy": WeatherCode.CLOUDY,
    "fair_day": WeatherCode.PARTLY_CLOUDY,
    "fair_night": WeatherCode.PARTLY_CLOUDY,
    "fog": WeatherCode.FOG,
    "heavyrain": WeatherCode.HEAVY_RAIN,
    "heavyrainthunder": WeatherCode.THUNDERY_HEAVY_RAIN,
    "heavyrainshowers_day": WeatherCode.HEAVY_SHOWERS,
    "heavyrainshowers_night": WeatherCode.HEAVY_SHOWERS,
    "heavyrainshowersandthunder_day": WeatherCode.THUNDERY_HEAVY_RAIN,
    "heavyrainshowersandthunder_night": WeatherCode.THUNDERY_HEAVY_RAIN,
    "heavysleet": WeatherCode.HEAVY_SNOW_SHOWERS,
    "heavysleetandthunder": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "heavysleetshowers_day": WeatherCode.HEAVY_SNOW_SHOWERS,
    "heavysleetshowers_night": WeatherCode.HEAVY_SNOW_SHOWERS,
    "heavysleetshowersandthunder_day": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "heavysleetshowersandthunder_night": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "heavysnow": WeatherCode.HEAVY_SNOW,
    "heavysnowandthunder": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "heavysnowshowers_day": WeatherCode.HEAVY_SNOW_SHOWERS,
    "heavysnowshowers_night": WeatherCode.HEAVY_SNOW_SHOWERS,
    "heavysnowshowersandthunder_day": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "heavysnowshowersandthunder_night": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "lightrain": WeatherCode.LIGHT_RAIN,
    "lightrainandthunder": WeatherCode.THUNDERY_SHOWERS,
    "lightrainshowers_day": WeatherCode.LIGHT_SHOWERS,
    "lightrainshowers_night": WeatherCode.LIGHT_SHOWERS,
    "lightrainshowersandthunder_day": WeatherCode.THUNDERY_SHOWERS,
    "lightrainshowersandthunder_night": WeatherCode.THUNDERY_SHOWERS,
    "lightsleet": WeatherCode.LIGHT_SLEET,
    "lightsleetandthunder": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "lightsleetshowers_day": WeatherCode.LIGHT_SLEET_SHOWERS,
    "lightsleetshowers_night": WeatherCode.LIGHT_SLEET_SHOWERS,
    "lightsnow": WeatherCode.LIGHT_SNOW,
    "lightsnowandthunder": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "lightsnowshowers_day": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "lightsnowshowers_night": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "lightsleetshowersandthunder_day": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "lightsleetshowersandthunder_night": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "partlycloudy_day": WeatherCode.PARTLY_CLOUDY,
    "partlycloudy_night": WeatherCode.PARTLY_CLOUDY,
    "rain": WeatherCode.LIGHT_RAIN,
    "rainandthunder": WeatherCode.THUNDERY_SHOWERS,
    "rainshowers_day": WeatherCode.LIGHT_SHOWERS,
    "rainshowers_night": WeatherCode.LIGHT_SHOWERS,
    "rainshowersandthunder_day": WeatherCode.THUNDERY_SHOWERS,
    "rainshowersandthunder_night": WeatherCode.THUNDERY_SHOWERS,
    "sleet": WeatherCode.LIGHT_SLEET,
    "sleetandthunder": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "sleetshowers_day": WeatherCode.LIGHT_SLEET_SHOWERS,
    "sleetshowers_night": WeatherCode.LIGHT_SLEET_SHOWERS,
    "sleetshowersandthunder_day": WeatherCode.THUNDERY_SHOWERS,
    "sleetshowersandthunder_night": WeatherCode.THUNDERY_SHOWERS,
    "snow": WeatherCode.HEAVY_SNOW,
    "snowandthunder": WeatherCode.THUNDERY_SNOW_SHOWERS,
    "snowshowers_day": WeatherCode.HEAVY_SNOW_SHOWERS,
    "snowshowers_night": WeatherCode.HEAVY_SNOW_SHOWERS,
    "snowshowersandthunder_day": WeatherCode.THUNDERY_SHOWERS,
    "snowshowersandthunder_night": WeatherCode.THUNDERY_SHOWERS,
})


def lookup(symbol_code: str | None) -> WeatherCode | None:
    if symbol_code is None:
        return None
    return SYMBOL_CODES.get(symbol_code)
