"""Turns the registry of host types into explicit wrap targets and installs them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List

from .wrapper import Instrumenter

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    """A host type whose own members should be instrumented under ``label``."""

    type: type
    label: str


@dataclass(frozen=True)
class InstrumentationTarget:
    owner: Any
    member: str
    label: str


def build_targets(registry: Iterable[RegistryEntry]) -> List[InstrumentationTarget]:
    """Snapshot every own member name of every registered type, in definition order."""

    targets: List[InstrumentationTarget] = []
    for entry in registry:
        for member in list(vars(entry.type)):
            targets.append(InstrumentationTarget(owner=entry.type, member=member, label=entry.label))
    return targets


def install_all(instrumenter: Instrumenter, registry: Iterable[RegistryEntry]) -> int:
    """Wrap every eligible member reachable from ``registry``; return how many were wrapped."""

    wrapped = 0
    for target in build_targets(registry):
        if instrumenter.wrap(target.owner, target.member, target.label):
            wrapped += 1
    LOGGER.info("Instrumented %s members", wrapped)
    return wrapped
