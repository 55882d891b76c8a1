"""Shared fixtures for oscalyze tests.

The three sample catalogs encode the same logical catalog:

- ac "Access Control": ac-1, ac-2, plus nested group ac-sub with ac-3
- au "Audit and Accountability": au-1
- a group with neither id nor title, and no controls
- one top-level control, top-1
"""

from __future__ import annotations

import json

import pytest

@pytest.fixture
def expected_families() -> list[tuple[str, str, int]]:
    """(id, title, control_count) for each family of the sample catalog."""
    return [
        ("ac", "Access Control", 3),
        ("au", "Audit and Accountability", 1),
        ("unknown", "unknown", 0),
        ("ungrouped", "Ungrouped Controls", 1),
    ]


@pytest.fixture
def sample_catalog_xml() -> str:
    return """<?xml version="1.0" encoding="UTF-8"?>
<catalog xmlns="http://csrc.nist.gov/ns/oscal/1.0" uuid="74c8ba1e-5cd4-4ad1-bbfd-d888e2f6c724">
  <metadata>
    <title>Sample Catalog</title>
    <published>2024-12-01T00:00:00Z</published>
    <last-modified>2025-01-01T00:00:00Z</last-modified>
    <version>1.0</version>
    <oscal-version>1.1.2</oscal-version>
  </metadata>
  <group id="ac" class="family">
    <title>Access Control</title>
    <control id="ac-1"><title>Policy and Procedures</title></control>
    <control id="ac-2">
      <title>Account Management</title>
      <control id="ac-2.1"><title>Automated System Account Management</title></control>
    </control>
    <group id="ac-sub">
      <title>Account Types</title>
      <control id="ac-3"><title>Access Enforcement</title></control>
    </group>
  </group>
  <group id="au" class="family">
    <title>Audit and Accountability</title>
    <control id="au-1"><title>Policy and Procedures</title></control>
  </group>
  <group/>
  <control id="top-1"><title>Top Level Control</title></control>
</catalog>
"""


@pytest.fixture
def sample_catalog_dict() -> dict:
    return {
        "catalog": {
            "uuid": "74c8ba1e-5cd4-4ad1-bbfd-d888e2f6c724",
            "metadata": {
                "title": "Sample Catalog",
                "published": "2024-12-01T00:00:00Z",
                "last-modified": "2025-01-01T00:00:00Z",
                "version": "1.0",
                "oscal-version": "1.1.2",
            },
            "groups": [
                {
                    "id": "ac",
                    "class": "family",
                    "title": "Access Control",
                    "controls": [
                        {"id": "ac-1", "title": "Policy and Procedures"},
                        {
                            "id": "ac-2",
                            "title": "Account Management",
                            "controls": [
                                {"id": "ac-2.1", "title": "Automated System Account Management"},
                            ],
                        },
                    ],
                    "groups": [
                        {
                            "id": "ac-sub",
                            "title": "Account Types",
                            "controls": [{"id": "ac-3", "title": "Access Enforcement"}],
                        },
                    ],
                },
                {
                    "id": "au",
                    "class": "family",
                    "title": "Audit and Accountability",
                    "controls": [{"id": "au-1", "title": "Policy and Procedures"}],
                },
                {},
            ],
            "controls": [{"id": "top-1", "title": "Top Level Control"}],
        }
    }


@pytest.fixture
def sample_catalog_json(sample_catalog_dict: dict) -> str:
    return json.dumps(sample_catalog_dict, indent=2)


@pytest.fixture
def sample_catalog_yaml() -> str:
    return """---
catalog:
  uuid: 74c8ba1e-5cd4-4ad1-bbfd-d888e2f6c724
  metadata:
    title: Sample Catalog
    published: 2024-12-01T00:00:00Z
    last-modified: 2025-01-01T00:00:00Z
    version: 1.0
    oscal-version: 1.1.2
  groups:
    - id: ac
      class: family
      title: Access Control
      controls:
        - id: ac-1
          title: Policy and Procedures
        - id: ac-2
          title: Account Management
          controls:
            - id: ac-2.1
              title: Automated System Account Management
      groups:
        - id: ac-sub
          title: Account Types
          controls:
            - id: ac-3
              title: Access Enforcement
    - id: au
      class: family
      title: Audit and Accountability
      controls:
        - id: au-1
          title: Policy and Procedures
    - {}
  controls:
    - id: top-1
      title: Top Level Control
"""


@pytest.fixture
def sample_files(tmp_path, sample_catalog_xml, sample_catalog_json, sample_catalog_yaml):
    """Write the sample catalogs to disk, keyed by format."""
    paths = {
        "xml": tmp_path / "catalog.xml",
        "json": tmp_path / "catalog.json",
        "yaml": tmp_path / "catalog.yaml",
    }
    paths["xml"].write_text(sample_catalog_xml, encoding="utf-8")
    paths["json"].write_text(sample_catalog_json, encoding="utf-8")
    paths["yaml"].write_text(sample_catalog_yaml, encoding="utf-8")
    return paths
