"""작업/상태 모델(Job and job-status model).

Job-status payloads carry no discriminator for which per-package shape they
use. `PackageStatusExtended` is a superset of `PackageStatus`, so a payload
is decoded as the extended shape first and only falls back to the basic
shape when required extended fields are missing. Decoding basic-first would
accept extended payloads too and silently drop their extra fields.
"""
from __future__ import annotations

from typing import ClassVar, Dict, FrozenSet, Generic, List, Optional, TypeVar, Union

from pydantic import ConfigDict, Field, RootModel, ValidationError

from common_lib.logger import get_logger

from .common import JobId, ProjectId, Status, UserId, WireEnum, WireModel, WirePayload
from .errors import WrongJobStatusKind
from .identifiers import PackageDescriptorAndLockfile, PackageType
from .package import IssueStatus

logger = get_logger(__name__)


class PackageStatus(WireModel):
    """기본 패키지 상태(Basic package metadata and processing status)."""

    omit_when_absent: ClassVar[FrozenSet[str]] = frozenset({"purl", "num_vulnerabilities"})

    # A PURL referencing this package
    purl: Optional[str] = None
    name: str
    version: str
    status: Status
    # Last update, as epoch seconds
    last_updated: int
    license: Optional[str] = None
    # The overall quality score of the package
    package_score: Optional[float] = None
    num_dependencies: int
    # Vulnerabilities in this package and all transitive dependencies
    num_vulnerabilities: Optional[int] = None


class PackageStatusExtended(PackageStatus):
    """확장 패키지 상태(Package status with ecosystem, risk vectors and issues)."""

    package_type: PackageType = Field(alias="type")
    risk_vectors: Dict[str, float] = Field(alias="riskVectors")
    # Dependency name to version
    dependencies: Dict[str, str]
    issues: List[IssueStatus]

    @property
    def basic_status(self) -> PackageStatus:
        return PackageStatus(
            **{name: getattr(self, name) for name in PackageStatus.model_fields}
        )


class JobDescriptor(WireModel):
    """목록 조회용 작업 요약(Flat job summary for list views)."""

    job_id: JobId
    project: str
    label: str
    num_dependencies: int
    packages: List[PackageDescriptorAndLockfile]
    pass_: bool = Field(alias="pass")
    msg: str
    date: str
    ecosystems: List[str] = Field(default_factory=list)
    num_incomplete: int = 0


class SubmitPackageRequest(WireModel):
    """패키지 분석 요청(Submit a package and its dependencies for analysis)."""

    omit_when_absent: ClassVar[FrozenSet[str]] = frozenset({"group_name"})

    # The subpackage dependencies of this package
    packages: List[PackageDescriptorAndLockfile]
    # Submitted interactively by a user rather than by CI
    is_user: bool
    project: ProjectId
    # Often the branch name
    label: str
    # The group that owns the project, if applicable
    group_name: Optional[str] = None


class SubmitPackageResponse(WireModel):
    """제출 직후 응답(Initial response after a package is submitted)."""

    model_config = ConfigDict(frozen=True)

    job_id: JobId


class AllJobsStatusResponse(WireModel):
    """최근 작업 요약 응답(Summary of the latest jobs).

    `count` is the length of `jobs`; `total_jobs` is the service-wide total.
    """

    jobs: List[JobDescriptor]
    total_jobs: int
    count: int

    @classmethod
    def from_jobs(cls, jobs: List[JobDescriptor], total_jobs: int) -> "AllJobsStatusResponse":
        return cls(jobs=jobs, total_jobs=total_jobs, count=len(jobs))


PackageStatusT = TypeVar("PackageStatusT", bound=PackageStatus)


class JobStatusResponse(WireModel, Generic[PackageStatusT]):
    """작업 상태 조회 응답(Data returned when polling a job's status).

    `pass_` and `msg` are only meaningful once `num_incomplete` reaches 0;
    until then `packages` may be partially populated.
    """

    job_id: JobId
    ecosystems: List[str] = Field(default_factory=list)
    user_id: UserId
    user_email: str
    # Job start, as epoch seconds
    created_at: int
    status: Status
    pass_: bool = Field(alias="pass")
    msg: str
    # Dependencies that have not completed processing
    num_incomplete: int = 0
    last_updated: int
    project: str
    project_name: str
    label: Optional[str] = None
    packages: List[PackageStatusT]

    @property
    def is_settled(self) -> bool:
        return self.num_incomplete == 0


ExtendedJobStatusResponse = JobStatusResponse[PackageStatusExtended]
BasicJobStatusResponse = JobStatusResponse[PackageStatus]


class JobStatusKind(WireEnum):
    EXTENDED = "extended"
    BASIC = "basic"


class JobStatusResponseVariant(RootModel):
    """Job status decoded as whichever shape fits, most specific first.

    Callers branch on `kind` and read `extended` or `basic`; reading the
    other arm raises `WrongJobStatusKind`.
    """

    root: Union[ExtendedJobStatusResponse, BasicJobStatusResponse] = Field(
        union_mode="left_to_right"
    )

    @property
    def kind(self) -> JobStatusKind:
        if isinstance(self.root, ExtendedJobStatusResponse):
            return JobStatusKind.EXTENDED
        return JobStatusKind.BASIC

    @property
    def extended(self) -> ExtendedJobStatusResponse:
        if self.kind is not JobStatusKind.EXTENDED:
            raise WrongJobStatusKind(JobStatusKind.EXTENDED.value, self.kind.value)
        return self.root

    @property
    def basic(self) -> BasicJobStatusResponse:
        if self.kind is not JobStatusKind.BASIC:
            raise WrongJobStatusKind(JobStatusKind.BASIC.value, self.kind.value)
        return self.root

    def to_wire(self):
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_wire(cls, payload: WirePayload) -> "JobStatusResponseVariant":
        return decode_job_status(payload)


def decode_job_status(payload: WirePayload) -> JobStatusResponseVariant:
    """
    Decode a job-status payload, trying the extended shape before the basic one.

    Args:
        payload: Decoded JSON dict, or the raw JSON document

    Returns:
        JobStatusResponseVariant whose `kind` names the shape that matched

    Raises:
        pydantic.ValidationError: the payload fits neither shape; the error
            describes the basic-shape failure
    """
    try:
        return JobStatusResponseVariant(root=ExtendedJobStatusResponse.from_wire(payload))
    except ValidationError as exc:
        logger.debug(
            "Job status is not the extended shape (%d error(s)), decoding as basic",
            exc.error_count(),
        )
    return JobStatusResponseVariant(root=BasicJobStatusResponse.from_wire(payload))


class CancelJobResponse(WireModel):
    """작업 취소 응답(Response from canceling a job)."""

    model_config = ConfigDict(frozen=True)

    msg: str
