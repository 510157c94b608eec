"""Domain-specific exceptions."""


class LocalizationError(Exception):
    pass


class MissingManifestResource(LocalizationError):
    """No resource set could be produced for a resource name and locale."""

    def __init__(self, resource_name: str, locale: str) -> None:
        super().__init__(
            f"The manifest resource '{resource_name}' for the culture '{locale}' is missing."
        )
        self.resource_name = resource_name
        self.locale = locale


class DuplicateResourceEntry(LocalizationError):
    pass
