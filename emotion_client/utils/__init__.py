from .config import ClientConfig
from .runtime_logging import configure_logging, context_extra

__all__ = [
	"ClientConfig",
	"configure_logging",
	"context_extra",
]
