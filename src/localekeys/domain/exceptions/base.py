"""Root of the localekeys error hierarchy."""


class LocaleKeysError(Exception):
    """Raised for misconfigured localizable classes.

    Catch this to handle any localekeys failure in one place.
    """
