"""Pytest configuration and shared fixtures."""
from datetime import datetime, timezone
from typing import Any, Dict

import pytest

from scan_types import (
    Author,
    DeveloperResponsiveness,
    Issue,
    IssuesListItem,
    Package,
    PackageDescriptor,
    PackageReleaseData,
    PackageSpecifier,
    PackageType,
    RiskDomain,
    RiskLevel,
    RiskScores,
    RiskType,
    ScoreDynamicsPoint,
    ScoredVersion,
)


@pytest.fixture
def left_pad() -> PackageDescriptor:
    """Descriptor used by the submit/poll examples."""
    return PackageDescriptor(name="left-pad", version="1.0.0", package_type=PackageType.NPM)


@pytest.fixture
def basic_package_status() -> Dict[str, Any]:
    """Minimal legacy per-package status, in canonical wire form."""
    return {
        "name": "left-pad",
        "version": "1.0.0",
        "status": "complete",
        "last_updated": 1700000000,
        "license": None,
        "package_score": 0.87,
        "num_dependencies": 0,
    }


@pytest.fixture
def extended_package_status(basic_package_status) -> Dict[str, Any]:
    """Basic status fields plus every field the extended shape requires."""
    return {
        **basic_package_status,
        "type": "npm",
        "riskVectors": {"vulnerability": 1.0, "malicious_code": 0.95, "author": 0.6},
        "dependencies": {"is-number": "7.0.0"},
        "issues": [
            {
                "tag": "HV0001",
                "id": "issue-1",
                "title": "Maintainer account takeover risk",
                "description": "The sole maintainer has no 2FA configured.",
                "severity": "high",
                "domain": "author",
                "ignored": None,
            }
        ],
    }


def _job_status(packages) -> Dict[str, Any]:
    return {
        "job_id": "job-123",
        "ecosystems": ["npm"],
        "user_id": "user-42",
        "user_email": "dev@example.com",
        "created_at": 1700000000,
        "status": "complete",
        "pass": True,
        "msg": "Project met threshold requirements",
        "num_incomplete": 0,
        "last_updated": 1700000100,
        "project": "proj-1",
        "project_name": "Demo project",
        "label": "main",
        "packages": packages,
    }


@pytest.fixture
def basic_job_status(basic_package_status) -> Dict[str, Any]:
    return _job_status([basic_package_status])


@pytest.fixture
def extended_job_status(extended_package_status) -> Dict[str, Any]:
    return _job_status([extended_package_status])


@pytest.fixture
def sample_issue() -> Issue:
    return Issue(
        tag="HM0012",
        id="issue-7",
        title="Obfuscated install script",
        description="postinstall downloads and evaluates remote code.",
        severity=RiskLevel.CRITICAL,
        domain=RiskDomain.MALICIOUS,
    )


@pytest.fixture
def full_package(sample_issue) -> Package:
    """Package with every optional field populated, including one dependency."""
    dependency = Package(
        purl="pkg:npm/is-number@7.0.0",
        id="dep-1",
        name="is-number",
        version="7.0.0",
        registry="npm",
        complete=True,
    )
    return Package(
        purl="pkg:npm/left-pad@1.0.0",
        id="pkg-1",
        name="left-pad",
        version="1.0.0",
        registry="npm",
        published_date="2016-03-22",
        latest_version="1.3.0",
        versions=[
            ScoredVersion(version="1.0.0", total_risk_score=0.55),
            ScoredVersion(version="1.3.0"),
        ],
        description="String left pad",
        license="WTFPL",
        dep_specs=[PackageSpecifier(registry="npm", name="is-number", version="7.0.0")],
        dependencies=[dependency],
        download_count=2500000,
        risk_scores=RiskScores(
            total=0.55,
            vulnerability=1.0,
            malicious=0.1,
            author=0.6,
            engineering=0.8,
            license=0.9,
        ),
        total_risk_score_dynamics=[
            ScoreDynamicsPoint(
                date_time=datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
                score=0.55,
                label="1.0.0",
            )
        ],
        issues_details=[sample_issue],
        issues=[
            IssuesListItem(
                risk_type=RiskType.MALICIOUS_RISK,
                score=0.1,
                impact=RiskLevel.CRITICAL,
                description=sample_issue.description,
                title=sample_issue.title,
                tag=sample_issue.tag,
                id=sample_issue.id,
            )
        ],
        authors=[
            Author(
                name="azer",
                avatar_url="https://example.com/azer.png",
                email="azer@example.com",
                profile_url="https://example.com/azer",
            )
        ],
        developer_responsiveness=DeveloperResponsiveness(
            open_issue_count=3,
            total_issue_count=40,
            open_issue_avg_duration=12,
            open_pull_request_count=1,
            total_pull_request_count=22,
            open_pull_request_avg_duration=4,
        ),
        complete=True,
        release_data=PackageReleaseData(
            first_release_date="2014-03-20",
            last_release_date="2018-04-09",
        ),
        repo_url="https://github.com/left-pad/left-pad",
        maintainers_recently_changed=False,
        is_abandonware=True,
    )
