"""
Artifact backends, one per generated NestJS building block.
"""

from __future__ import annotations

from .base import Artifact, CodeBackend, composite_key_name, identity_params
from .controller_backend import ControllerBackend
from .dto_backend import DtoBackend
from .module_backend import ModuleBackend
from .repository_backend import RepositoryBackend
from .service_backend import ServiceBackend

# Emission order; also the order files are written in
BACKENDS: list[type[CodeBackend]] = [
    DtoBackend,
    RepositoryBackend,
    ServiceBackend,
    ControllerBackend,
    ModuleBackend,
]

__all__ = [
    "Artifact",
    "BACKENDS",
    "CodeBackend",
    "ControllerBackend",
    "DtoBackend",
    "ModuleBackend",
    "RepositoryBackend",
    "ServiceBackend",
    "composite_key_name",
    "identity_params",
]
