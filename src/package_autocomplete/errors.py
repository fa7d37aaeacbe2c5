"""Exception types raised inside the package."""


class PackageAutocompleteError(Exception):
    """Base class for package-autocomplete errors."""


class NuGetClientError(PackageAutocompleteError):
    """A NuGet request failed (transport error, timeout, bad status or malformed payload).

    Attributes:
        url: The URL that was requested
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url
