"""University, campus and restaurant schemas."""

from pydantic import Field

from app.schemas.common import CamelModel


class UniversityCreate(CamelModel):
    name: str = Field(min_length=1)


class UniversityUpdate(CamelModel):
    name: str | None = None


class UniversityRead(CamelModel):
    id: str
    name: str


class CampusCreate(CamelModel):
    university_id: str = Field(min_length=1)
    name: str = Field(min_length=1)


class CampusUpdate(CamelModel):
    name: str | None = None


class CampusRead(CamelModel):
    id: str
    university_id: str
    name: str


class RestaurantCreate(CamelModel):
    campus_id: str = Field(min_length=1)
    university_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    location: str | None = None
    cuisine: str | None = None
    open_time: str | None = None
    close_time: str | None = None
    is_24x7: bool | None = Field(default=None, alias="is24x7")


class RestaurantUpdate(CamelModel):
    name: str | None = None
    location: str | None = None
    cuisine: str | None = None
    open_time: str | None = None
    close_time: str | None = None
    is_24x7: bool | None = Field(default=None, alias="is24x7")


class RestaurantRead(CamelModel):
    id: str
    campus_id: str
    university_id: str
    name: str
    location: str
    cuisine: str
    open_time: str
    close_time: str
    is_24x7: bool = Field(alias="is24x7")
