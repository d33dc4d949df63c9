"""Framework exceptions."""


class ArborError(Exception):
    """Base class for all framework errors."""

    pass


class LifecycleError(ArborError):
    """A component lifecycle contract was broken."""

    pass


class UninitializedLifecycleError(LifecycleError):
    """A hook override did not chain to the base implementation.

    Raised as soon as the controller observes that the state advance the base
    hook performs did not happen. The component hierarchy is not properly
    initialized and rendering of the subtree must stop.
    """

    def __init__(self, component_path: str, hook: str, message: str | None = None):
        self.component_path = component_path
        self.hook = hook
        super().__init__(
            message
            or (
                f"Component '{component_path or '<page>'}' has not been properly "
                f"initialized: an override of {hook}() did not call the base implementation"
            )
        )


class IllegalLifecycleStateError(LifecycleError):
    """An operation was attempted in a state that does not allow it."""

    pass


class DuplicateComponentError(ArborError, ValueError):
    """A sibling with the same id already exists."""

    pass


class MarkupNotFoundError(ArborError):
    """No markup is available for a component path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No markup found for component path '{path or '<page>'}'")


class InvalidResourceFinderConfigurationError(ArborError, ValueError):
    """A folder was added to a resource finder that is not path-style."""

    pass


class MissingResourceError(ArborError, KeyError):
    """A localized string could not be resolved."""

    def __init__(self, key: str, component_path: str | None = None, locale: str | None = None):
        self.key = key
        self.component_path = component_path
        self.locale = locale
        super().__init__(key)

    def __str__(self) -> str:
        where = f" for component '{self.component_path}'" if self.component_path else ""
        locale = f" (locale: {self.locale})" if self.locale else ""
        return f"Unable to find property: '{self.key}'{where}{locale}"


class ResourceAccessDeniedError(ArborError, PermissionError):
    """The package resource guard rejected a resource path."""

    pass


__all__ = [
    "ArborError",
    "LifecycleError",
    "UninitializedLifecycleError",
    "IllegalLifecycleStateError",
    "DuplicateComponentError",
    "MarkupNotFoundError",
    "InvalidResourceFinderConfigurationError",
    "MissingResourceError",
    "ResourceAccessDeniedError",
]
