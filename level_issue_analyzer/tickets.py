"""Level marker lookup and JIRA key extraction over a commit log."""

import re


def level_marker(level_name, prefix='levelname:'):
    """Return the text a level commit carries, e.g. ``levelname:uimaj-2.1.0-003``."""
    return prefix + level_name


def ticket_pattern(project):
    """Compile the pattern for keys of a JIRA project, e.g. ``UIMA-257``."""
    return re.compile(rf"({re.escape(project)}-[0-9]+)")


def find_level_revision(entries, marker):
    """Find the revision of the commit that created a level.

    A message only matches if it contains the marker after its first
    character. Every entry is checked, so when several messages contain
    the marker the last one in log order wins.

    Args:
        entries (list): LogEntry records in log order
        marker (str): level marker text

    Returns:
        int: revision of the level commit, or None if no message matches
    """
    level_revision = None
    for entry in entries:
        if entry.message.find(marker) > 0:
            level_revision = entry.revision
    return level_revision


def extract_ticket_keys(entries, level_revision, pattern):
    """Collect the JIRA keys committed after the level revision.

    Only the first key in each message is taken.
    """
    keys = set()
    if level_revision is None:
        return keys

    for entry in entries:
        if entry.revision > level_revision:
            match = pattern.search(entry.message)
            if match:
                keys.add(match.group(0))
    return keys
