# Core module exports
from core.config import settings, get_settings
from core.logging import (
    configure_logging,
    get_logger,
    bind_context,
    unbind_context,
    parsing_logger,
    ingest_logger,
    cli_logger,
)
