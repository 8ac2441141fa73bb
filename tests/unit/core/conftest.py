"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_TEXT = """\
# Overview
Tomatoes need full sun.
* Water daily
* Mulch the base

1. Prepare soil
2. Plant seedlings
**Harvest in 60 days**
"""

ANALYSIS_PAYLOAD = {
    "plant_name": "Tomato",
    "health_status": "Diseased",
    "issue_description": "Early blight. **Remove** affected leaves.",
    "organic_solutions": ["Neem oil spray", "**Copper** fungicide weekly"],
    "confidence": 0.87,
    "details": {"notes": "## Notes\n* Rotate crops"},
}


@pytest.fixture(name="sample_text")
def sample_text_fixture():
    return SAMPLE_TEXT


@pytest.fixture(name="analysis_payload")
def analysis_payload_fixture():
    return dict(ANALYSIS_PAYLOAD)
