class CountryDataError(Exception):
    """Base class for lookup failures against the country directory."""


class CountryNotFoundError(CountryDataError):
    def __init__(self, code: str):
        super().__init__(f"Country not found: {code}")
        self.code = code


class MalformedCountryDataError(CountryDataError):
    """A record lists a border code that is not in the directory."""

    def __init__(self, code: str, border: str):
        super().__init__(f"Country {code} references unknown border {border}")
        self.code = code
        self.border = border


class DatasetError(Exception):
    """The dataset file could not be read or is internally inconsistent."""


class InvalidResponseError(CountryDataError):
    """The country API answered with a body that is not valid JSON."""
