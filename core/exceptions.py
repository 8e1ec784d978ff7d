class ManifestError(Exception):
    """Base class for every failure raised while extracting a manifest."""


class ManifestParseError(ManifestError):
    """The input text is not well-formed XML."""


class ManifestSchemaError(ManifestError):
    """The input is XML but has no <manifest> root element."""


class ConfigurationError(ManifestError):
    """The settings file could not be read or has the wrong shape."""
