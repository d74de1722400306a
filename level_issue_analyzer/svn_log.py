"""
Subversion commit log access.

Runs ``svn log <repository> --xml`` and turns the XML document into a list
of ``LogEntry`` records in document order.
"""

import logging
import subprocess
import xml.etree.ElementTree as ElementTree
from collections import namedtuple

from .errors import LogFetchError, LogParseError

logger = logging.getLogger(__name__)

XML_HEADER = '<?xml'
# What svn prints for a repository without any log entries
EMPTY_LOG = '<?xml version="1.0" encoding="utf-8"?><log>'

LogEntry = namedtuple('LogEntry', ['revision', 'message'])


def fetch_svn_log(repository, svn_command='svn'):
    """Run the svn log command once and return its XML output.

    Args:
        repository (str): svn repository path or URL
        svn_command (str): svn executable to run

    Returns:
        str: the log document

    Raises:
        LogFetchError: if svn wrote anything to stderr, could not be started,
            or did not produce a non-empty XML log
    """
    print(f"Getting logs for: {repository}")
    command = [svn_command, 'log', repository, '--xml']

    try:
        result = subprocess.run(command, capture_output=True, text=True,
                                encoding='utf-8', errors='replace')
    except OSError as e:
        logger.exception("Could not run %s", ' '.join(command))
        raise LogFetchError(repository, f"could not run {svn_command}: {e}") from e

    # Anything on stderr means failure, whatever the exit code says
    if result.stderr:
        for line in result.stderr.splitlines():
            print(line)
        raise LogFetchError(repository, "svn reported errors")

    content = ''.join(result.stdout.splitlines())
    if not content.startswith(XML_HEADER):
        raise LogFetchError(repository, "output is not an XML document")
    if content.lower() == EMPTY_LOG:
        raise LogFetchError(repository, "log is empty")

    print(f"Done getting logs for: {repository}\n")
    return result.stdout


def get_svn_log(repository, svn_command='svn'):
    """Fetch the svn log of a repository, retrying once on failure."""
    try:
        return fetch_svn_log(repository, svn_command)
    except LogFetchError as e:
        logger.debug("First log fetch failed: %s", e)
        print("Error getting repository logs, retry one more time.")
    return fetch_svn_log(repository, svn_command)


def parse_commit_log(document):
    """Parse an svn XML log into LogEntry records.

    Entries without a message get an empty one. A well-formed log without
    entries gives an empty list.

    Raises:
        LogParseError: if the document is not valid XML or a revision
            attribute is not a number
    """
    try:
        root = ElementTree.fromstring(document)
    except ElementTree.ParseError as e:
        raise LogParseError(f"Invalid log document: {e}") from e

    entries = []
    for logentry in root.findall('logentry'):
        revision = logentry.get('revision')
        try:
            revision = int(revision)
        except (TypeError, ValueError) as e:
            raise LogParseError(f"Invalid revision attribute: {revision!r}") from e
        entries.append(LogEntry(revision, logentry.findtext('msg') or ''))
    return entries
