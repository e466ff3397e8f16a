import logging

import inject

from taskdesk.domain.repositories import TaskBackendRepository
from taskdesk.infrastructure.bridge.codecs import DateTimeCodec, RFC3339Codec
from taskdesk.setup.bridge_config import BridgeSettings, get_bridge_settings


def configure_di(
    backend: TaskBackendRepository,
    codec: DateTimeCodec | None = None,
    settings: BridgeSettings | None = None,
) -> None:
    """Bind the task backend, the date-time codec and the settings into the DI container."""
    if codec is None:
        codec = RFC3339Codec()
    if settings is None:
        settings = get_bridge_settings()

    def _config(binder: inject.Binder) -> None:
        binder.bind(TaskBackendRepository, backend)
        binder.bind(DateTimeCodec, codec)
        binder.bind(BridgeSettings, settings)

    inject.clear_and_configure(_config)


def configure_logging(settings: BridgeSettings | None = None) -> None:
    if settings is None:
        settings = get_bridge_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=f"%(asctime)s {settings.APP_NAME}/{settings.APP_VERSION} %(levelname)s %(name)s: %(message)s",
    )
