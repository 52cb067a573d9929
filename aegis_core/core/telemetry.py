"""
Moduł: telemetry - modele snapshotu telemetrii systemowej.

Snapshot dostarcza zewnętrzny kolektor; modele opisują tylko minimalny kształt
czytany przez context_injector. Każda sekcja jest opcjonalna, a nieznane pola
są ignorowane, więc częściowe snapshoty przechodzą walidację.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]
Amount = Union[str, int, float]


class _Section(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ProcessInfo(_Section):
    name: str = ""
    pid: Optional[int] = None
    cpu: Optional[Number] = None


class CpuInfo(_Section):
    usage: Optional[Number] = None
    topProcesses: List[ProcessInfo] = Field(default_factory=list)


class MemoryInfo(_Section):
    used: Optional[Amount] = None
    total: Optional[Amount] = None
    free: Optional[Amount] = None
    usage: Optional[Number] = None


class DiskInfo(_Section):
    mount: str = ""
    used: Optional[Amount] = None
    total: Optional[Amount] = None
    free: Optional[Amount] = None
    usage: Optional[Number] = None


class PortInfo(_Section):
    port: Union[int, str]
    process: Optional[str] = None


class SystemErrorEntry(_Section):
    message: str = ""
    source: Optional[str] = None


class ContainerInfo(_Section):
    name: str = ""
    status: str = ""


class GitInfo(_Section):
    branch: Optional[str] = None
    status: Optional[str] = None


class PlatformInfo(_Section):
    os: str = "unknown"
    arch: str = "unknown"


class TelemetrySnapshot(_Section):
    """Pełny snapshot przekazany przez kolektor telemetrii."""

    cpu: Optional[CpuInfo] = None
    memory: Optional[MemoryInfo] = None
    disk: Optional[List[DiskInfo]] = None
    network: Optional[List[PortInfo]] = None
    errors: Optional[List[SystemErrorEntry]] = None
    docker: Optional[List[ContainerInfo]] = None
    git: Optional[GitInfo] = None
    platform: Optional[PlatformInfo] = None


def snapshot_to_mapping(snapshot: Any) -> Dict[str, Any]:
    """
    Normalizuje snapshot (model lub mapping) do zwykłego słownika.

    Brakujące sekcje są pomijane; wartość, która nie jest ani modelem, ani
    mappingiem, daje pusty słownik.
    """
    if isinstance(snapshot, BaseModel):
        return snapshot.model_dump(exclude_none=True)
    if isinstance(snapshot, Mapping):
        return {key: value for key, value in snapshot.items() if value is not None}
    return {}
