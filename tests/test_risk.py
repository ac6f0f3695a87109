"""Unit tests for the risk taxonomy and scores."""

import pytest
from pydantic import ValidationError

from scan_types import (
    HeuristicResult,
    RiskDomain,
    RiskLevel,
    RiskScores,
    RiskType,
    Vulnerability,
)


class TestRiskDomainMapping:
    """Test the RiskDomain -> RiskType lookup."""

    @pytest.mark.parametrize(
        "domain, risk_type",
        [
            (RiskDomain.AUTHOR_RISK, RiskType.AUTHORS_RISK),
            (RiskDomain.ENGINEERING_RISK, RiskType.ENGINEERING_RISK),
            (RiskDomain.MALICIOUS, RiskType.MALICIOUS_RISK),
            (RiskDomain.VULNERABILITIES, RiskType.VULNERABILITIES),
            (RiskDomain.LICENSE_RISK, RiskType.LICENSE_RISK),
        ],
    )
    def test_fixed_table(self, domain, risk_type):
        assert RiskType.from_domain(domain) is risk_type
        assert domain.risk_type is risk_type

    def test_no_domain_maps_to_total(self):
        """Test TOTAL_RISK is only an aggregate, never a domain's type."""
        assert all(domain.risk_type is not RiskType.TOTAL_RISK for domain in RiskDomain)

    def test_domain_ordinals(self):
        assert [domain.ordinal for domain in RiskDomain] == [0, 1, 2, 3, 4]


class TestDisplayForms:
    """Test display strings of the risk enums."""

    @pytest.mark.parametrize(
        "risk_type, code",
        [
            (RiskType.TOTAL_RISK, "ALL"),
            (RiskType.VULNERABILITIES, "VLN"),
            (RiskType.MALICIOUS_RISK, "MAL"),
            (RiskType.AUTHORS_RISK, "AUT"),
            (RiskType.ENGINEERING_RISK, "ENG"),
            (RiskType.LICENSE_RISK, "LIC"),
        ],
    )
    def test_risk_type_codes(self, risk_type, code):
        assert str(risk_type) == code
        assert risk_type.code == code

    def test_domain_display_matches_type_display(self):
        for domain in RiskDomain:
            assert str(domain) == str(domain.risk_type)
            assert f"{domain}" == f"{domain.risk_type}"

    def test_risk_level_display_is_lowercase(self):
        assert [str(level) for level in RiskLevel] == ["info", "low", "medium", "high", "critical"]


class TestRiskLevelScore:
    """Test the fixed severity weights."""

    def test_score_table(self):
        assert RiskLevel.INFO.score == 1.0
        assert RiskLevel.LOW.score == 0.8
        assert RiskLevel.MEDIUM.score == 0.65
        assert RiskLevel.HIGH.score == 0.35
        assert RiskLevel.CRITICAL.score == 0.1

    def test_scores_strictly_decrease(self):
        scores = [level.score for level in RiskLevel]
        assert all(a > b for a, b in zip(scores, scores[1:]))


class TestLegacyAliases:
    """Test legacy wire names decode to the canonical values."""

    def test_malicious_domain_alias(self):
        assert RiskDomain("malicious") is RiskDomain.MALICIOUS
        legacy = HeuristicResult.from_wire({"domain": "malicious", "score": 0.4, "risk_level": "high"})
        canonical = HeuristicResult.from_wire(
            {"domain": "malicious_code", "score": 0.4, "risk_level": "high"}
        )
        assert legacy == canonical
        assert legacy.to_wire()["domain"] == "malicious_code"

    def test_malicious_risk_type_alias(self):
        assert RiskType("maliciousRisk") is RiskType.MALICIOUS_RISK
        assert RiskType.MALICIOUS_RISK.value == "maliciousCodeRisk"

    def test_unknown_domain_is_rejected(self):
        with pytest.raises(ValidationError):
            HeuristicResult.from_wire({"domain": "typosquat", "score": 0.4, "risk_level": "high"})


class TestRiskScores:
    """Test RiskScores wire form and lookups."""

    def test_defaults_are_zero(self):
        assert RiskScores().to_wire() == {
            "total": 0.0,
            "vulnerability": 0.0,
            "malicious_code": 0.0,
            "author": 0.0,
            "engineering": 0.0,
            "license": 0.0,
        }

    def test_legacy_malicious_key(self):
        legacy = RiskScores.from_wire({"total": 0.5, "malicious": 0.2})
        canonical = RiskScores.from_wire({"total": 0.5, "malicious_code": 0.2})
        assert legacy == canonical
        assert legacy.malicious == 0.2

    def test_round_trip(self):
        scores = RiskScores(
            total=0.4, vulnerability=0.9, malicious=0.3, author=0.7, engineering=0.5, license=1.0
        )
        assert RiskScores.from_wire(scores.to_json()) == scores

    def test_lookup_by_type_and_domain(self):
        scores = RiskScores(total=0.4, malicious=0.3, license=1.0)
        assert scores.for_type(RiskType.TOTAL_RISK) == 0.4
        assert scores.for_domain(RiskDomain.MALICIOUS) == 0.3
        assert scores.for_domain(RiskDomain.LICENSE_RISK) == 1.0


class TestVulnerability:
    """Test the legacy Vulnerability shape."""

    def test_severity_wire_name(self):
        vulnerability = Vulnerability(
            cve=["CVE-2021-23337"],
            base_severity=7.2,
            risk_level=RiskLevel.HIGH,
            title="Command injection",
            description="template() allows command injection",
            remediation="Upgrade to 4.17.21",
        )
        wire = vulnerability.to_wire()
        assert wire["severity"] == 7.2
        assert "base_severity" not in wire
        assert Vulnerability.from_wire(wire) == vulnerability
