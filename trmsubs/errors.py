"""Exception type shared by the numerical routines."""


class SubsError(Exception):
    """Raised when a numerical routine is given invalid input or fails."""