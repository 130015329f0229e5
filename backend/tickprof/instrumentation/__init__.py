"""Member wrapping and registry installation."""

from .registry import InstrumentationTarget, RegistryEntry, build_targets, install_all
from .wrapper import Instrumenter, is_wrapped, original_member

__all__ = [
    "InstrumentationTarget",
    "Instrumenter",
    "RegistryEntry",
    "build_targets",
    "install_all",
    "is_wrapped",
    "original_member",
]
