"""Exception hierarchy for fileprops."""


class FilePropsError(Exception):
    """Base class for all fileprops errors."""

    pass


class MandatorySourceFailure(FilePropsError):
    """A mandatory attribute source failed; the aggregation is aborted."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")


class OptionalSourceFailure(FilePropsError):
    """An optional attribute source failed; it contributes no rows."""

    pass


class CommandError(OptionalSourceFailure):
    """External command could not be spawned, timed out, or exited non-zero."""

    def __init__(self, cmd: list[str], message: str, stderr: str = ""):
        self.cmd = cmd
        self.stderr = stderr
        super().__init__(f"{cmd[0]}: {message}")


class MalformedMetadata(OptionalSourceFailure):
    """Media-inspection output did not have the expected structure."""

    pass
