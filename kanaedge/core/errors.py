class KanaEdgeError(Exception):
    """Base class for failures of the transliteration engine."""


class InitError(KanaEdgeError):
    """The engine could not be constructed or its dictionary could not be loaded."""


class ConversionError(KanaEdgeError):
    """The engine rejected the input or failed while converting it."""
