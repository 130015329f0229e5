"""Installs timing wrappers on class members, exactly once per member."""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Callable, Optional

from ..host import HostRuntime
from ..utils import Recorder

LOGGER = logging.getLogger(__name__)

WRAP_MARKER_PREFIX = "_profiled_original_"
CONSTRUCTOR_NAMES = frozenset({"__init__", "__new__"})

_MISSING = object()


def marker_name(member_name: str) -> str:
    """Attribute under which the unwrapped member is kept on its owner."""

    return f"{WRAP_MARKER_PREFIX}{member_name}"


def is_wrapped(owner: Any, member_name: str) -> bool:
    return marker_name(member_name) in _own_namespace(owner)


def original_member(owner: Any, member_name: str) -> Any:
    """Return the member as it was before wrapping (or the current one if never wrapped)."""

    namespace = _own_namespace(owner)
    return namespace.get(marker_name(member_name), namespace.get(member_name))


def owner_name(owner: Any) -> str:
    if isinstance(owner, type):
        return owner.__name__
    return getattr(type(owner), "__name__", "")


def _own_namespace(owner: Any):
    try:
        return vars(owner)
    except TypeError:
        return {}


class Instrumenter:
    """Replaces methods and properties with versions that report CPU time to a recorder.

    Methods are only timed while ``is_enabled()`` is true. Property getters and
    setters are timed on every access unless ``gate_accessors`` is set.
    """

    def __init__(
        self,
        recorder: Recorder,
        host: HostRuntime,
        is_enabled: Callable[[], bool],
        gate_accessors: bool = False,
    ) -> None:
        self.recorder = recorder
        self.host = host
        self.is_enabled = is_enabled
        self.gate_accessors = gate_accessors

    def wrap(self, owner: Any, member_name: str, label: Optional[str] = None) -> bool:
        """Wrap ``owner.member_name`` in place.

        Returns ``True`` when a wrapper was installed. Every other outcome
        (missing member, constructor, plain value, already wrapped, owner that
        cannot be modified) is a silent no-op returning ``False``.
        """

        descriptor = _own_namespace(owner).get(member_name, _MISSING)
        if descriptor is _MISSING:
            return False
        if member_name in CONSTRUCTOR_NAMES or member_name.startswith(WRAP_MARKER_PREFIX):
            return False

        if is_wrapped(owner, member_name):
            return False

        class_name = label or owner_name(owner)
        key = f"{class_name}:{member_name}"

        if isinstance(descriptor, property):
            if descriptor.fget is None and descriptor.fset is None:
                return False
            replacement = self._wrap_property(descriptor, key)
        elif isinstance(descriptor, (staticmethod, classmethod)):
            replacement = type(descriptor)(self.wrap_function(descriptor.__func__, key))
        elif inspect.isroutine(descriptor):
            replacement = self.wrap_function(descriptor, key)
            if not hasattr(descriptor, "__get__"):
                # builtins such as math.hypot do not bind to the instance
                replacement = staticmethod(replacement)
        else:
            return False

        try:
            setattr(owner, marker_name(member_name), descriptor)
            setattr(owner, member_name, replacement)
        except (AttributeError, TypeError):
            LOGGER.debug("Cannot instrument %s.%s, owner is read-only", class_name, member_name)
            return False

        LOGGER.debug("Instrumented %s.%s", class_name, member_name)
        return True

    def wrap_function(self, func: Callable[..., Any], key: str) -> Callable[..., Any]:
        """Return ``func`` timed under ``key`` whenever the profiler is enabled."""

        host = self.host
        recorder = self.recorder
        is_enabled = self.is_enabled

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if is_enabled():
                start = host.cpu_used()
                result = func(*args, **kwargs)
                end = host.cpu_used()
                recorder.record(key, end - start)
                return result
            return func(*args, **kwargs)

        return wrapper

    def _wrap_property(self, descriptor: property, key: str) -> property:
        fget = self._wrap_accessor(descriptor.fget, f"{key}:get") if descriptor.fget else None
        fset = self._wrap_accessor(descriptor.fset, f"{key}:set") if descriptor.fset else None
        return property(fget, fset, descriptor.fdel, descriptor.__doc__)

    def _wrap_accessor(self, accessor: Callable[..., Any], key: str) -> Callable[..., Any]:
        host = self.host
        recorder = self.recorder
        is_enabled = self.is_enabled
        gated = self.gate_accessors

        @functools.wraps(accessor)
        def wrapper(*args):
            if gated and not is_enabled():
                return accessor(*args)
            start = host.cpu_used()
            result = accessor(*args)
            end = host.cpu_used()
            recorder.record(key, end - start)
            return result

        return wrapper
