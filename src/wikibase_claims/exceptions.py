class WikibaseError(Exception):
    """Base class for every error raised while decoding or encoding claims."""


class InvalidIdentifier(WikibaseError):
    """A property or item identifier does not match its expected pattern."""


class MalformedValue(WikibaseError):
    """A required attribute is missing or unparsable within a recognized datatype."""


class UnrecognizedRank(WikibaseError):
    """A claim rank other than preferred, normal or deprecated."""


class UnexpectedNodeShape(WikibaseError):
    """The node handed to a decoder does not have the expected tag or structure."""


class EditRejected(WikibaseError):
    """The edit endpoint answered without success."""
