"""Utility layer errors, raised while wiring the application."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A setting the selected implementation needs is missing."""

    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"{message} (set {setting})")


class DependencyInjectionError(UtilError):
    """No provider implementation exists for a component."""

    def __init__(self, component: str, use_mock: bool):
        self.component = component
        self.use_mock = use_mock
        kind = "mock" if use_mock else "production"
        super().__init__(f"No {kind} implementation for {component}")
