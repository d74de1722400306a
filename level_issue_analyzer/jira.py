"""Look up JIRA issue titles from the issue browse pages."""

import re

import requests

TITLE_PATTERN = re.compile(r'<title>(.*)</title>')


def issue_url(base_url, key):
    return base_url + key


def extract_title(content):
    """Return the text of the first <title> element, or '' if there is none."""
    match = TITLE_PATTERN.search(content)
    if match:
        return match.group(1)
    return ''


def fetch_issue_title(url, prefix_bytes=500, timeout=None):
    """Fetch the title of a JIRA issue page.

    Only the first ``prefix_bytes`` of the page are read, the title sits
    in the page head.

    Args:
        url (str): issue browse URL
        prefix_bytes (int): number of bytes to read from the response body
        timeout (float, optional): request timeout in seconds

    Returns:
        str: the page title, '' if none was found in the prefix

    Raises:
        requests.exceptions.RequestException: on connection errors, timeouts
            and HTTP error statuses
    """
    headers = {'User-Agent': 'LevelIssueAnalyzer'}
    response = requests.get(url, headers=headers, stream=True, timeout=timeout)
    try:
        response.raise_for_status()
        prefix = response.raw.read(prefix_bytes, decode_content=True)
    finally:
        response.close()

    content = prefix.decode('utf-8', errors='replace')
    return extract_title(content)
