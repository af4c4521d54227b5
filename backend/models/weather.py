from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union


class FlightCategory(str, Enum):
    VFR = "VFR"
    MVFR = "MVFR"
    IFR = "IFR"
    LIFR = "LIFR"


class FlightCategoryResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: FlightCategory
    visibility_sm: Optional[Union[int, float]] = Field(default=None, alias="visibilitySM")
    ceiling_ft: Optional[int] = Field(default=None, alias="ceilingFt")


class WeatherResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    station: str
    metar: str
    taf: str
    category: FlightCategory
    visibility_sm: Optional[Union[int, float]] = Field(default=None, alias="visibilitySM")
    ceiling_ft: Optional[int] = Field(default=None, alias="ceilingFt")
    translated_metar: str = Field(alias="translatedMetar")
    translated_taf: str = Field(alias="translatedTaf")
    fetched_at: str = Field(alias="fetchedAt")


class RecentSearches(BaseModel):
    stations: List[str]
