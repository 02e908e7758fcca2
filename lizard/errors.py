"""Exception type shared across the interpreter."""


class LizardError(RuntimeError):
    """Raised when a Lizard statement, expression or lookup fails."""