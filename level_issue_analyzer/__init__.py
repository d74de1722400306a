"""
Level Issue Analyzer
====================

Lists the JIRA issues fixed since a level (release tag) was created.

This package provides functionality to:
- Fetch the svn commit log of a repository as XML
- Find the revision of the commit that created a level
- Collect the JIRA keys from the commit messages after that revision
- Look up the title of each JIRA issue
- Write the issues to levelIssues.txt
"""

__version__ = "1.0.0"
__author__ = "Level Issue Analyzer"

from .analyze_level_issues import main

__all__ = ["main"]
