from pydantic import BaseModel, ConfigDict, Field


class CountryName(BaseModel):
    model_config = ConfigDict(frozen=True)

    common: str
    official: str


class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: CountryName
    capital: str
    area: float = Field(ge=0, description="Square kilometers")
    cca3: str = Field(min_length=3, max_length=3)
    borders: tuple[str, ...] = ()


class ExpandedCountry(BaseModel):
    """A country whose border codes have been replaced by the bordering records.

    Only one level deep: each entry in ``borders`` is a plain ``Country`` that
    still carries raw border codes.
    """

    model_config = ConfigDict(frozen=True)

    name: CountryName
    capital: str
    area: float
    cca3: str
    borders: tuple[Country, ...] = ()

    @property
    def border_codes(self) -> list[str]:
        return [b.cca3 for b in self.borders]
