class ProcsysError(Exception):
    """
    Base class for every error raised by procsys.
    """


class PathAccessError(ProcsysError):
    """
    A pseudo-filesystem path could not be listed, opened or read.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"cannot access {path}: {message}")


class MalformedInputError(ProcsysError):
    """
    Input text does not have the shape the parser expects.
    """
