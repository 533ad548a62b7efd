"""Exception taxonomy shared by signature containers and their collaborators."""


class GMSignError(Exception):
    """Base class for all gmsign failures."""


class InvalidArgument(GMSignError, ValueError):
    """Required identity material is missing or malformed."""


class IOFailure(GMSignError, OSError):
    """The data to be signed could not be read completely."""


class SignatureComputationFailure(GMSignError, RuntimeError):
    """The signing key could not be initialised or the signature could not be produced."""
