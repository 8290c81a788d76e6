# catacomb_errors.py
# Errors raised while generating catacomb rooms


class CatacombError(ValueError):
    """Base class for every room-generation error."""


class ConfigurationError(CatacombError):
    """Numeric base outside 2..36."""


class FormatError(CatacombError):
    """Numeral with digits that are not valid for the base."""


class EmptyInputError(CatacombError):
    """Random draw against an empty candidate set."""
