"""Global state management for blob_mime."""

from blob_mime.dependencies import Dependencies

# Global state (initialized on first access)
_dependencies: Dependencies | None = None


def get_dependencies() -> Dependencies:
    """Get or create the process-wide dependencies.

    Startup must finish before concurrent use; after that the
    instance is only read.
    """
    global _dependencies
    if _dependencies is None:
        _dependencies = Dependencies.create()
    return _dependencies


def reset_state() -> None:
    """Reset global state for testing.

    This function clears the singleton instance, allowing tests
    to start with fresh state. Should only be used in test fixtures.
    """
    global _dependencies
    _dependencies = None


def set_dependencies(dependencies: Dependencies) -> None:
    """Set the global dependencies instance.

    Allows tests to inject alternate override sets without modifying
    module internals.

    Args:
        dependencies: Dependencies instance to use globally.
    """
    global _dependencies
    _dependencies = dependencies
