"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from uiengine.clients.http import ActionClient
from uiengine.core.config import Settings, get_settings
from uiengine.core.logging_config import configure_logging
from uiengine.handlers.playground import PlaygroundHandler
from uiengine.runtime.dispatcher import ActionDispatcher
from uiengine.schema.loader import DocumentLoader


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_action_client(self, settings: Settings) -> ActionClient:
        """Shared HTTP client for api_call actions."""
        return ActionClient(timeout=settings.http_timeout)

    @singleton
    @provider
    def provide_dispatcher(self, client: ActionClient) -> ActionDispatcher:
        return ActionDispatcher(client)

    @singleton
    @provider
    def provide_loader(self, settings: Settings) -> DocumentLoader:
        return DocumentLoader(settings)

    @provider
    def provide_playground(self, loader: DocumentLoader, dispatcher: ActionDispatcher) -> PlaygroundHandler:
        """Fresh handler per request; loader and dispatcher are shared."""
        return PlaygroundHandler(loader, dispatcher)


def create_container(settings: Settings | None = None) -> Injector:
    """Configure logging from settings and create the injector."""
    module = CoreModule(settings)
    configure_logging(module.settings.log_level, module.settings.json_logs)
    return Injector([module])


async def shutdown_container(injector: Injector) -> None:
    """Release the shared HTTP client."""
    await injector.get(ActionDispatcher).aclose()
