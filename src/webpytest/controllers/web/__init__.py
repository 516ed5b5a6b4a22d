from .selenium_web import (
    SUPPORTED_ENGINE_KINDS,
    SeleniumWebController,
    configure_driver,
    create_driver,
)
