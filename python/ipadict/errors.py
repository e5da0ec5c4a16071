"""Exceptions raised by ipadict.

Bad input data never raises; it is reported as an issue instead. Only a
failure of an external dependency surfaces to the caller.
"""


class MetadataResolutionError(Exception):
    """Metadata could not be resolved because an external source failed."""
