"""패키지 보고서 모델(Package report model).

`Package` is the full analysis report for one package version. It is built
up while analysis runs: a package may start with only its identity and
`complete=False`, then be enriched with `Package.merge` as results arrive.
Every optional field means "not known yet" until `complete` is set.
"""
from __future__ import annotations

import copy
from typing import Annotated, Any, ClassVar, FrozenSet, Iterator, List, Literal, Optional, Union

from pydantic import AliasChoices, AwareDatetime, ConfigDict, Field, PrivateAttr, TypeAdapter
from pydantic.alias_generators import to_camel

from common_lib.logger import get_logger

from .common import WireModel, WirePayload
from .identifiers import PackageSpecifier
from .risk import RiskDomain, RiskLevel, RiskScores, RiskType

logger = get_logger(__name__)


class ScoredVersion(WireModel):
    """버전별 총 위험 점수(Total risk score of a published version)."""

    model_config = ConfigDict(frozen=True)

    version: str
    total_risk_score: Optional[float] = None


class ScoreDynamicsPoint(WireModel):
    """시간에 따른 점수 변화(Change in score over time)."""

    model_config = ConfigDict(alias_generator=to_camel, frozen=True)

    date_time: AwareDatetime
    score: float
    label: str


class Issue(WireModel):
    """단일 패키지 이슈(A single package issue).

    `rule` identifies the producing rule inside the analysis service. It is
    never encoded, and a `rule` key in a decoded payload is ignored.
    """

    model_config = ConfigDict(frozen=True)

    tag: Optional[str] = None
    id: Optional[str] = None
    title: str
    description: str
    severity: RiskLevel = Field(validation_alias=AliasChoices("severity", "risk_level"))
    domain: RiskDomain = Field(validation_alias=AliasChoices("domain", "risk_domain"))
    _rule: Optional[str] = PrivateAttr(default=None)

    @property
    def rule(self) -> Optional[str]:
        return self._rule

    def with_rule(self, rule: Optional[str]) -> "Issue":
        """Return a copy tagged with the producing rule."""
        issue = self.model_copy()
        issue._rule = rule
        return issue


class IssueStatus(Issue):
    """A dependency issue with the reason it is ignored, if it is."""

    ignored: Optional[str] = None

    @property
    def is_ignored(self) -> bool:
        return self.ignored is not None

    @property
    def issue(self) -> Issue:
        return Issue(
            tag=self.tag,
            id=self.id,
            title=self.title,
            description=self.description,
            severity=self.severity,
            domain=self.domain,
        ).with_rule(self.rule)

    @classmethod
    def from_issue(cls, issue: Issue, ignored: Optional[str] = None) -> "IssueStatus":
        return cls(
            tag=issue.tag,
            id=issue.id,
            title=issue.title,
            description=issue.description,
            severity=issue.severity,
            domain=issue.domain,
            ignored=ignored,
        ).with_rule(issue.rule)


class IssuesListItem(WireModel):
    """클라이언트용 이슈 항목(Client-facing rendering of an issue)."""

    model_config = ConfigDict(alias_generator=to_camel)

    risk_type: RiskType
    score: float
    impact: RiskLevel
    description: str
    title: str
    tag: Optional[str] = None
    id: Optional[str] = None
    ignored: Optional[str] = None


class Author(WireModel):
    """작성자 정보(Author information)."""

    model_config = ConfigDict(alias_generator=to_camel, frozen=True)

    name: str
    avatar_url: str
    email: str
    profile_url: str


class DeveloperResponsiveness(WireModel):
    """Responsiveness of the package developers. Durations are in days."""

    model_config = ConfigDict(frozen=True)

    open_issue_count: Optional[int] = None
    total_issue_count: Optional[int] = None
    open_issue_avg_duration: Optional[int] = None
    open_pull_request_count: Optional[int] = None
    total_pull_request_count: Optional[int] = None
    open_pull_request_avg_duration: Optional[int] = None


class PackageReleaseData(WireModel):
    model_config = ConfigDict(alias_generator=to_camel, frozen=True)

    first_release_date: str = ""
    last_release_date: str = ""


class Package(WireModel):
    """패키지 분석 보고서(Full package analysis report).

    `issues_details` holds the raw findings and `issues` their client-facing
    rendering. The two lists are kept side by side for different consumers
    and are not derived from each other here.
    """

    model_config = ConfigDict(alias_generator=to_camel)
    omit_when_absent: ClassVar[FrozenSet[str]] = frozenset({"purl"})

    purl: Optional[str] = None
    id: str = ""
    name: str = ""
    version: str = ""
    registry: str = ""
    published_date: Optional[str] = None
    latest_version: Optional[str] = None
    versions: List[ScoredVersion] = Field(default_factory=list)
    description: Optional[str] = None
    license: Optional[str] = None
    dep_specs: List[PackageSpecifier] = Field(default_factory=list)
    dependencies: Optional[List[Package]] = None
    download_count: int = 0
    risk_scores: RiskScores = Field(default_factory=RiskScores)
    total_risk_score_dynamics: Optional[List[ScoreDynamicsPoint]] = None
    issues_details: List[Issue] = Field(default_factory=list)
    issues: List[IssuesListItem] = Field(default_factory=list)
    authors: List[Author] = Field(default_factory=list)
    developer_responsiveness: Optional[DeveloperResponsiveness] = None
    complete: bool = False
    release_data: Optional[PackageReleaseData] = None
    repo_url: Optional[str] = None
    maintainers_recently_changed: Optional[bool] = None
    is_abandonware: Optional[bool] = None

    @property
    def specifier(self) -> PackageSpecifier:
        return PackageSpecifier(registry=self.registry, name=self.name, version=self.version)

    def merge(self, update: "Package") -> "Package":
        """
        Apply a partial update and return the merged package.

        Only fields the update explicitly set to a non-None value replace the
        current ones; everything else keeps its current value. `complete`
        never goes back to False once either side is complete. The result
        owns deep copies of both inputs, so neither input is aliased.

        Args:
            update: Package carrying the newly known fields

        Returns:
            A new Package
        """
        changes = {
            name: copy.deepcopy(getattr(update, name))
            for name in update.model_fields_set
            if getattr(update, name) is not None
        }
        if "complete" in changes:
            changes["complete"] = self.complete or update.complete
        logger.debug(
            "Merging %d field(s) into package %s@%s", len(changes), self.name, self.version
        )
        return self.model_copy(update=changes, deep=True)

    def walk(self) -> Iterator["Package"]:
        """Yield this package, then its dependency tree depth-first."""
        yield self
        for dependency in self.dependencies or []:
            yield from dependency.walk()


class PackageAlreadyProcessed(WireModel):
    """The package was analysed before; the historical report is returned."""

    status: Literal["AlreadyProcessed"] = "AlreadyProcessed"
    data: Package


class PackageAlreadySubmitted(WireModel):
    """A job for the package exists but has not finished."""

    status: Literal["AlreadySubmitted"] = "AlreadySubmitted"


class PackageNewlySubmitted(WireModel):
    """A new job was created for the package."""

    status: Literal["New"] = "New"


PackageSubmitResponse = Annotated[
    Union[PackageAlreadyProcessed, PackageAlreadySubmitted, PackageNewlySubmitted],
    Field(discriminator="status"),
]

package_submit_response_adapter: TypeAdapter[Any] = TypeAdapter(PackageSubmitResponse)


def decode_package_submit_response(payload: WirePayload):
    """
    Decode a submission result, picking the variant from its `status` tag.

    Raises:
        pydantic.ValidationError: unknown tag, or `data` missing for
            `AlreadyProcessed`
    """
    if isinstance(payload, (str, bytes, bytearray)):
        return package_submit_response_adapter.validate_json(payload)
    return package_submit_response_adapter.validate_python(payload)
