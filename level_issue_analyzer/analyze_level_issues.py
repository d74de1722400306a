#!/usr/bin/env python3
"""
Level Issue Analyzer

Finds the JIRA issues committed since a level was created and writes them,
with their titles, to a report file.
"""

import argparse
import logging
import sys
from enum import IntEnum

import requests

from . import config as defaults
from .config import AnalyzerConfig
from .errors import LogFetchError, LogParseError, UsageError
from .jira import fetch_issue_title, issue_url
from .report import ReportWriter
from .svn_log import get_svn_log, parse_commit_log
from .tickets import extract_ticket_keys, find_level_revision, level_marker, ticket_pattern

logger = logging.getLogger(__name__)


class RunStatus(IntEnum):
    OK = 0
    USAGE_ERROR = 1
    TITLE_ERROR = 2
    FETCH_ERROR = -1


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def read_commit_log(repository, config):
    """Fetch and parse the log of a repository.

    Returns:
        list: LogEntry records, or None if the log could not be parsed

    Raises:
        LogFetchError: if the log could not be fetched after one retry
    """
    document = get_svn_log(repository, config.svn_command)
    try:
        return parse_commit_log(document)
    except LogParseError:
        logger.exception("Could not parse the log of %s", repository)
        return None


def write_issue_report(keys, config):
    """Resolve the title of every key and write the report lines.

    Raises:
        requests.exceptions.RequestException: if an issue page could not be
            fetched; the lines written so far stay in the file
    """
    with ReportWriter(config.output_file) as report:
        for key in keys:
            url = issue_url(config.base_url, key)
            title = fetch_issue_title(url, config.title_prefix_bytes, config.http_timeout)
            report.write(url, title)
    print(f"\n{report.lines_written} Jira issues written to file: {config.output_file}")


def analyze_level(level_name, config):
    """Run the whole analysis for a level.

    Args:
        level_name (str): name of the last level, e.g. ``uimaj-2.1.0-003``
        config (AnalyzerConfig): analysis settings

    Returns:
        RunStatus: outcome of the run
    """
    marker = level_marker(level_name, config.level_prefix)

    try:
        level_entries = read_commit_log(config.level_repository, config)
        level_revision = find_level_revision(level_entries or [], marker)

        if level_revision is None:
            print(f"No commit found for level {marker}")
            keys = set()
        else:
            print(f"Level {marker} was created in revision {level_revision}")
            trunk_entries = read_commit_log(config.trunk_repository, config)
            keys = extract_ticket_keys(trunk_entries or [], level_revision,
                                       ticket_pattern(config.project))
    except LogFetchError as e:
        logger.debug("Log fetch failed after retry: %s", e)
        print(f"Error getting repository logs for {e.repository}")
        return RunStatus.FETCH_ERROR

    print(f"Found {len(keys)} Jira issues")

    try:
        write_issue_report(keys, config)
    except requests.exceptions.RequestException:
        logger.exception("Error fetching Jira issue title")
        return RunStatus.TITLE_ERROR

    return RunStatus.OK


def build_parser():
    parser = _ArgumentParser(
        prog='level-issue-analyzer',
        description='List the Jira issues fixed since the last level',
    )
    parser.add_argument('level', help='Last level name, e.g. uimaj-2.1.0-003')
    parser.add_argument('--level-repo', default=defaults.LEVEL_REPOSITORY,
                        help='Repository whose log holds the level commits')
    parser.add_argument('--trunk-repo', default=defaults.TRUNK_REPOSITORY,
                        help='Repository whose log is searched for Jira issues')
    parser.add_argument('--project', default=defaults.PROJECT, help='Jira project key')
    parser.add_argument('--base-url', default=defaults.BASE_URL, help='Jira issue browse URL')
    parser.add_argument('--output', default=defaults.OUTPUT_FILE, help='Report file')
    parser.add_argument('--svn', default=defaults.SVN_COMMAND, help='svn executable')
    parser.add_argument('--timeout', type=float, help='Timeout in seconds for Jira requests')
    parser.add_argument('--verbose', action='store_true', help='Log debug output')
    return parser


def run(argv=None):
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}")
        parser.print_usage(sys.stdout)
        return RunStatus.USAGE_ERROR

    logging.basicConfig(
        format="%(asctime)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    return analyze_level(args.level, AnalyzerConfig.from_args(args))


def main():
    sys.exit(int(run()))


if __name__ == "__main__":
    main()
