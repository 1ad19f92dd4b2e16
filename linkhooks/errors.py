"""Exception hierarchy for linkhooks.

Every error raised here is configuration-fatal: the configuration pass that
raised it must stop, since continuing would produce an inconsistent build.
"""


# =============================================================================
# Custom Exception Hierarchy
# =============================================================================

class ConfigurationError(Exception):
    """Base class for errors that abort the configuration pass."""
    pass


class UnknownTargetError(ConfigurationError):
    """Raised when an operation names a target that was never declared."""
    pass


class DuplicateTargetError(ConfigurationError):
    """Raised when a target name is declared twice."""
    pass


class InvalidLinkError(ConfigurationError):
    """Raised when a link request violates the build tool's scope rules.

    Interface-only targets may only link with the INTERFACE scope.
    """
    pass


class HookLoadError(ConfigurationError):
    """Raised when a registered hook file is missing or malformed."""
    pass


class HookExecutionError(ConfigurationError):
    """Raised when an ``on_linked_as_dependency`` callback fails."""
    pass


class UnrecognizedCompilerError(ConfigurationError):
    """Raised when the compiler path matches no known architecture pattern."""
    pass


class FetchError(ConfigurationError):
    """Raised when a package-manager bootstrap cannot be downloaded or staged."""
    pass


class PackageManagerError(ConfigurationError):
    """Raised when an external package-manager process fails.

    Attributes:
        returncode: Exit code of the process, or None if it never started.
    """

    def __init__(self, message: str, returncode: "int | None" = None) -> None:
        super().__init__(message)
        self.returncode = returncode
