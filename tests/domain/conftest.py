"""Shared resume fixtures for domain package tests."""

from __future__ import annotations

import pytest

PLAIN_RESUME = """\
John Smith
john.smith@example.com
(555) 123-4567

EXPERIENCE
Senior Engineer at Acme Corp 2020-2023
- Built the billing platform used by every product team
- Cut release time in half with automated pipelines
Software Developer - Initech - 2017-2020
Maintained legacy reporting services for finance.

EDUCATION
Bachelor of Science - State University - 2013-2017

SKILLS
Python, Go, distributed systems
- Kubernetes and container orchestration
"""

MARKDOWN_RESUME = """\
# Jane Doe
jane@example.com | (555) 123-4567 | linkedin.com/in/janedoe
---
## Summary
Backend engineer focused on reliable payment systems.

## Experience
- Led the migration of billing services to Kubernetes in 2021.
- Reduced checkout latency by 40 percent.

## Skills
**Languages:** Python, Go
- Kubernetes
"""


@pytest.fixture
def plain_resume() -> str:
    return PLAIN_RESUME


@pytest.fixture
def markdown_resume() -> str:
    return MARKDOWN_RESUME
