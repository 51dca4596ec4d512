"""Wire models for the met.no locationforecast 2.0 document.

Every optional block and numeric detail defaults to None so that presence
reflects what the provider actually sent.
"""

from pydantic import BaseModel, Field

FEATURE_TYPE = "Feature"


class InstantDetails(BaseModel):
    air_pressure_at_sea_level: float | None = None
    air_temperature: float | None = None
    cloud_area_fraction: float | None = None
    relative_humidity: float | None = None
    wind_from_direction: float | None = None
    wind_speed: float | None = None


class Instant(BaseModel):
    details: InstantDetails = Field(default_factory=InstantDetails)


class Summary(BaseModel):
    symbol_code: str | None = None


class PeriodDetails(BaseModel):
    precipitation_amount: float | None = None


class Period(BaseModel):
    summary: Summary | None = None
    details: PeriodDetails | None = None

    @property
    def symbol_code(self) -> str | None:
        return self.summary.symbol_code if self.summary else None

    @property
    def precipitation_amount(self) -> float | None:
        return self.details.precipitation_amount if self.details else None


class SampleData(BaseModel):
    instant: Instant = Field(default_factory=Instant)
    next_1_hours: Period | None = None
    next_6_hours: Period | None = None
    next_12_hours: Period | None = None


class TimeStep(BaseModel):
    time: str  # kept raw; parsed leniently during normalization
    data: SampleData = Field(default_factory=SampleData)


class Units(BaseModel):
    air_temperature: str | None = None
    precipitation_amount: str | None = None
    wind_speed: str | None = None


class Meta(BaseModel):
    updated_at: str | None = None
    units: Units = Field(default_factory=Units)


class Properties(BaseModel):
    meta: Meta = Field(default_factory=Meta)
    timeseries: list[TimeStep] = []


class Geometry(BaseModel):
    type: str = "Point"
    coordinates: list[float] = Field(min_length=2, max_length=3)  # lon, lat[, alt]


class ForecastDocument(BaseModel):
    type: str
    geometry: Geometry
    properties: Properties

    @property
    def lat_lon(self) -> tuple[float, float]:
        lon, lat = self.geometry.coordinates[:2]
        return lat, lon
