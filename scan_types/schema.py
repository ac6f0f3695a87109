"""JSON 스키마 생성(JSON schema publication for the wire types)."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter

from common_lib.config import get_settings
from common_lib.logger import get_logger

from .identifiers import (
    PackageDescriptor,
    PackageDescriptorAndLockfile,
    PackageSpecifier,
    PackageSpecifierAndLockfile,
    PackageUrlAndLockfile,
)
from .job import (
    AllJobsStatusResponse,
    CancelJobResponse,
    JobDescriptor,
    JobStatusResponseVariant,
    PackageStatus,
    PackageStatusExtended,
    SubmitPackageRequest,
    SubmitPackageResponse,
)
from .package import Issue, IssueStatus, IssuesListItem, Package, PackageSubmitResponse
from .risk import HeuristicResult, RiskScores, Vulnerability

logger = get_logger(__name__)

WIRE_TYPES: Dict[str, Any] = {
    "PackageDescriptor": PackageDescriptor,
    "PackageSpecifier": PackageSpecifier,
    "PackageDescriptorAndLockfile": PackageDescriptorAndLockfile,
    "PackageSpecifierAndLockfile": PackageSpecifierAndLockfile,
    "PackageUrlAndLockfile": PackageUrlAndLockfile,
    "RiskScores": RiskScores,
    "HeuristicResult": HeuristicResult,
    "Vulnerability": Vulnerability,
    "Issue": Issue,
    "IssueStatus": IssueStatus,
    "IssuesListItem": IssuesListItem,
    "Package": Package,
    "PackageSubmitResponse": PackageSubmitResponse,
    "PackageStatus": PackageStatus,
    "PackageStatusExtended": PackageStatusExtended,
    "JobDescriptor": JobDescriptor,
    "SubmitPackageRequest": SubmitPackageRequest,
    "SubmitPackageResponse": SubmitPackageResponse,
    "AllJobsStatusResponse": AllJobsStatusResponse,
    "JobStatusResponseVariant": JobStatusResponseVariant,
    "CancelJobResponse": CancelJobResponse,
}


def json_schema(tp: Any) -> Dict[str, Any]:
    """Return the JSON schema of a wire model or type alias, using wire names."""
    return TypeAdapter(tp).json_schema(by_alias=True)


def export_schemas() -> Dict[str, Dict[str, Any]]:
    return {name: json_schema(tp) for name, tp in WIRE_TYPES.items()}


def write_schemas(directory: Optional[str | Path] = None) -> List[Path]:
    """
    Write one `<Name>.schema.json` file per wire type.

    Args:
        directory: Output directory; defaults to the configured `schema_dir`

    Returns:
        Paths of the written files, in `WIRE_TYPES` order
    """
    out_dir = Path(directory if directory is not None else get_settings().schema_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for name, schema in export_schemas().items():
        path = out_dir / f"{name}.schema.json"
        path.write_text(json.dumps(schema, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        written.append(path)

    logger.info("Wrote %d JSON schema(s) to %s", len(written), out_dir)
    return written
