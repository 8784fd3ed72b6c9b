"""Exceptions raised while assembling a container."""


class LxcLocalError(Exception):
    """Base class for every error the assembly pipeline reports."""
    pass


class FatalInputError(LxcLocalError):
    """A required input is missing or unusable; the run cannot continue."""
    pass


class ExtractionError(FatalInputError):
    """tar failed to unpack an archive."""

    def __init__(self, archive, returncode: int, stderr: str = ""):
        self.archive = archive
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(
            f"Failed to extract {archive} (tar exited with {returncode}){detail}"
        )


class ConfigurationError(LxcLocalError):
    """Settings file could not be loaded or validated."""
    pass


class AssemblyInterrupted(LxcLocalError):
    """A termination signal arrived mid-run."""

    def __init__(self, signum: int):
        self.signum = signum
        super().__init__(f"Interrupted by signal {signum}")
