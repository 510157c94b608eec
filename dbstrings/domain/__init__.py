from dbstrings.domain.models import LocalizedString, ResourceEntry

__all__ = ["LocalizedString", "ResourceEntry"]
