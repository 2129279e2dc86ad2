"""Service layer: the provider gateway and the session runtime."""

from .gateway import ProviderGateway
from .runtime import FeedbackRuntime

__all__ = ["ProviderGateway", "FeedbackRuntime"]
