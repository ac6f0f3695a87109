"""Wire types for the package-scan service: identifiers, risk, reports and jobs."""

# Error handling
from scan_types.errors import (
    InvalidPackageUrl,
    ScanTypesError,
    UnknownEcosystem,
    UnsupportedPackageType,
    WrongJobStatusKind,
)

# Shared wire base
from scan_types.common import JobId, ProjectId, Status, UserId, WireModel

# Identifiers
from scan_types.identifiers import (
    PackageDescriptor,
    PackageDescriptorAndLockfile,
    PackageSpecifier,
    PackageSpecifierAndLockfile,
    PackageType,
    PackageUrlAndLockfile,
    PurlType,
    descriptor_from_purl,
    descriptor_from_specifier,
    descriptor_to_purl,
    from_purl_type,
    parse_package_type,
    specifier_from_descriptor,
    to_purl_type,
)

# Risk
from scan_types.risk import (
    HeuristicResult,
    RiskDomain,
    RiskLevel,
    RiskScores,
    RiskType,
    Vulnerability,
)

# Package reports
from scan_types.package import (
    Author,
    DeveloperResponsiveness,
    Issue,
    IssueStatus,
    IssuesListItem,
    Package,
    PackageAlreadyProcessed,
    PackageAlreadySubmitted,
    PackageNewlySubmitted,
    PackageReleaseData,
    PackageSubmitResponse,
    ScoreDynamicsPoint,
    ScoredVersion,
    decode_package_submit_response,
)

# Jobs
from scan_types.job import (
    AllJobsStatusResponse,
    BasicJobStatusResponse,
    CancelJobResponse,
    ExtendedJobStatusResponse,
    JobDescriptor,
    JobStatusKind,
    JobStatusResponse,
    JobStatusResponseVariant,
    PackageStatus,
    PackageStatusExtended,
    SubmitPackageRequest,
    SubmitPackageResponse,
    decode_job_status,
)

__all__ = [
    # Error classes
    "ScanTypesError",
    "UnknownEcosystem",
    "UnsupportedPackageType",
    "InvalidPackageUrl",
    "WrongJobStatusKind",
    # Shared
    "WireModel",
    "Status",
    "JobId",
    "ProjectId",
    "UserId",
    # Identifiers
    "PackageType",
    "PurlType",
    "PackageDescriptor",
    "PackageSpecifier",
    "PackageDescriptorAndLockfile",
    "PackageSpecifierAndLockfile",
    "PackageUrlAndLockfile",
    "parse_package_type",
    "to_purl_type",
    "from_purl_type",
    "descriptor_from_specifier",
    "specifier_from_descriptor",
    "descriptor_to_purl",
    "descriptor_from_purl",
    # Risk
    "RiskDomain",
    "RiskType",
    "RiskLevel",
    "RiskScores",
    "HeuristicResult",
    "Vulnerability",
    # Package reports
    "ScoredVersion",
    "ScoreDynamicsPoint",
    "Issue",
    "IssueStatus",
    "IssuesListItem",
    "Author",
    "DeveloperResponsiveness",
    "PackageReleaseData",
    "Package",
    "PackageAlreadyProcessed",
    "PackageAlreadySubmitted",
    "PackageNewlySubmitted",
    "PackageSubmitResponse",
    "decode_package_submit_response",
    # Jobs
    "PackageStatus",
    "PackageStatusExtended",
    "JobDescriptor",
    "SubmitPackageRequest",
    "SubmitPackageResponse",
    "AllJobsStatusResponse",
    "JobStatusResponse",
    "ExtendedJobStatusResponse",
    "BasicJobStatusResponse",
    "JobStatusKind",
    "JobStatusResponseVariant",
    "decode_job_status",
    "CancelJobResponse",
]
