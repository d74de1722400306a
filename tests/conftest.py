"""
Shared pytest fixtures for the level issue analyzer tests.
"""

import subprocess
from unittest.mock import MagicMock

import pytest


def _svn_log_xml(entries):
    parts = ['<?xml version="1.0" encoding="UTF-8"?>', '<log>']
    for revision, message in entries:
        parts.append(
            f'<logentry revision="{revision}">'
            '<author>dev</author>'
            '<date>2007-02-01T10:00:00.000000Z</date>'
            f'<msg>{message}</msg>'
            '</logentry>'
        )
    parts.append('</log>')
    return '\n'.join(parts) + '\n'


@pytest.fixture
def svn_log_xml():
    """Build an ``svn log --xml`` document from (revision, message) pairs."""
    return _svn_log_xml


@pytest.fixture
def completed_svn():
    """Build the CompletedProcess an svn log run returns."""
    def build(stdout='', stderr='', returncode=0):
        return subprocess.CompletedProcess(['svn', 'log'], returncode, stdout, stderr)
    return build


@pytest.fixture
def jira_response():
    """Build a streamed requests response whose body is the given HTML."""
    def build(body):
        response = MagicMock()
        response.raise_for_status.return_value = None
        data = body.encode('utf-8')
        response.raw.read.side_effect = lambda amt=None, decode_content=None: data[:amt]
        return response
    return build
