"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from orgclock.core import OrgParser


SAMPLE_ORG = """\
#+TITLE: Sample
* Project :work:
** TODO Task :urgent:
:PROPERTIES:
:EFFORT: 1:00
:END:
:LOGBOOK:
CLOCK: [2023-01-01 Sun 09:00]--[2023-01-01 Sun 10:30] =>  1:30
:END:
"""


@pytest.fixture
def temp_dir(tmp_path):
    """Provide temporary directory for test files."""
    return tmp_path


@pytest.fixture
def org_parser():
    """Parser with the default TODO keywords."""
    return OrgParser()


@pytest.fixture
def sample_org_text():
    """Two-level document with one closed clock."""
    return SAMPLE_ORG


@pytest.fixture
def write_org(temp_dir):
    """Write Org text to a file in the temp dir and return its path."""
    def _write(name: str, content: str) -> str:
        path = temp_dir / name
        path.write_text(content, encoding='utf-8')
        return str(path)
    return _write


@pytest.fixture
def sample_org_file(write_org, sample_org_text):
    """Sample document written to disk."""
    return write_org('sample.org', sample_org_text)
