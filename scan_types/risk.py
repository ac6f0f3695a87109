"""위험 모델(Risk model).

Two parallel taxonomies describe the same five concepts. `RiskDomain`
classifies findings on the input side; `RiskType` is the reporting side and
adds the aggregate `TOTAL_RISK`. Every domain maps to exactly one type.
"""
from __future__ import annotations

from typing import Dict, List

from pydantic import AliasChoices, ConfigDict, Field

from .common import WireEnum, WireModel


class RiskDomain(WireEnum):
    """위험 도메인(Risk domain of a finding)."""

    # One or more authors is a possible bad actor
    AUTHOR_RISK = "author"
    # Poor engineering practices and other code smells
    ENGINEERING_RISK = "engineering"
    # Malware, crypto miners and the like
    MALICIOUS = "malicious_code"
    # A code vulnerability such as use-after-free
    VULNERABILITIES = "vulnerability"
    # License is unknown or incompatible with the project
    LICENSE_RISK = "license"

    @classmethod
    def _missing_(cls, value):
        if value == "malicious":
            return cls.MALICIOUS
        return None

    @property
    def risk_type(self) -> "RiskType":
        return _DOMAIN_TO_TYPE[self]

    def __str__(self) -> str:
        return str(self.risk_type)


class RiskType(WireEnum):
    """보고용 위험 유형(Reporting-side risk type)."""

    TOTAL_RISK = "totalRisk"
    VULNERABILITIES = "vulnerabilities"
    MALICIOUS_RISK = "maliciousCodeRisk"
    AUTHORS_RISK = "authorsRisk"
    ENGINEERING_RISK = "engineeringRisk"
    LICENSE_RISK = "licenseRisk"

    @classmethod
    def _missing_(cls, value):
        if value == "maliciousRisk":
            return cls.MALICIOUS_RISK
        return None

    @classmethod
    def from_domain(cls, domain: RiskDomain) -> "RiskType":
        return _DOMAIN_TO_TYPE[domain]

    @property
    def code(self) -> str:
        """Three-letter code used for compact rendering."""
        return _TYPE_CODES[self]

    def __str__(self) -> str:
        return self.code


_DOMAIN_TO_TYPE: Dict[RiskDomain, RiskType] = {
    RiskDomain.MALICIOUS: RiskType.MALICIOUS_RISK,
    RiskDomain.VULNERABILITIES: RiskType.VULNERABILITIES,
    RiskDomain.ENGINEERING_RISK: RiskType.ENGINEERING_RISK,
    RiskDomain.AUTHOR_RISK: RiskType.AUTHORS_RISK,
    RiskDomain.LICENSE_RISK: RiskType.LICENSE_RISK,
}

_TYPE_CODES: Dict[RiskType, str] = {
    RiskType.TOTAL_RISK: "ALL",
    RiskType.VULNERABILITIES: "VLN",
    RiskType.MALICIOUS_RISK: "MAL",
    RiskType.AUTHORS_RISK: "AUT",
    RiskType.ENGINEERING_RISK: "ENG",
    RiskType.LICENSE_RISK: "LIC",
}


class RiskLevel(WireEnum):
    """이슈 심각도(Issue severity bucket)."""

    # No action needs to be taken
    INFO = "info"
    # Minor issues like cosmetic code smells
    LOW = "low"
    # May be indicative of overall quality issues
    MEDIUM = "medium"
    # Possibly exploitable behavior in some circumstances
    HIGH = "high"
    # Should fix as soon as possible, may be under active exploitation
    CRITICAL = "critical"

    @property
    def score(self) -> float:
        """Weight used when combining issue severities into a domain score."""
        return _LEVEL_SCORES[self]


_LEVEL_SCORES: Dict[RiskLevel, float] = {
    RiskLevel.INFO: 1.0,
    RiskLevel.LOW: 0.8,
    RiskLevel.MEDIUM: 0.65,
    RiskLevel.HIGH: 0.35,
    RiskLevel.CRITICAL: 0.1,
}


class RiskScores(WireModel):
    """도메인별 위험 점수(Risk scores by domain)."""

    model_config = ConfigDict(frozen=True)

    total: float = 0.0
    vulnerability: float = 0.0
    malicious: float = Field(
        default=0.0,
        alias="malicious_code",
        validation_alias=AliasChoices("malicious_code", "malicious"),
    )
    author: float = 0.0
    engineering: float = 0.0
    license: float = 0.0

    def for_type(self, risk_type: RiskType) -> float:
        return getattr(self, _TYPE_SCORE_FIELDS[risk_type])

    def for_domain(self, domain: RiskDomain) -> float:
        return self.for_type(domain.risk_type)


_TYPE_SCORE_FIELDS: Dict[RiskType, str] = {
    RiskType.TOTAL_RISK: "total",
    RiskType.VULNERABILITIES: "vulnerability",
    RiskType.MALICIOUS_RISK: "malicious",
    RiskType.AUTHORS_RISK: "author",
    RiskType.ENGINEERING_RISK: "engineering",
    RiskType.LICENSE_RISK: "license",
}


# v--- Legacy heuristic responses, kept for older clients ---v


class HeuristicResult(WireModel):
    """The results of an individual heuristic run."""

    domain: RiskDomain
    score: float
    risk_level: RiskLevel


class Vulnerability(WireModel):
    """A vulnerability reported by the legacy heuristics."""

    cve: List[str]
    base_severity: float = Field(alias="severity")
    risk_level: RiskLevel
    title: str
    description: str
    remediation: str
