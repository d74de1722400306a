"""Settings for a level issue analysis run."""

from dataclasses import dataclass
from typing import Optional


LEVEL_PREFIX = 'levelname:'
LEVEL_REPOSITORY = 'http://svn.apache.org/repos/asf/incubator/uima/uimaj'
TRUNK_REPOSITORY = 'http://svn.apache.org/repos/asf/incubator/uima/uimaj/trunk'
PROJECT = 'UIMA'
BASE_URL = 'https://issues.apache.org/jira/browse/'
OUTPUT_FILE = 'levelIssues.txt'
SVN_COMMAND = 'svn'
TITLE_PREFIX_BYTES = 500


@dataclass(frozen=True)
class AnalyzerConfig:
    """Read-only settings shared by every stage of the analysis.

    The defaults reproduce the Apache UIMA setup the tool was written for.
    """
    level_prefix: str = LEVEL_PREFIX
    level_repository: str = LEVEL_REPOSITORY
    trunk_repository: str = TRUNK_REPOSITORY
    project: str = PROJECT
    base_url: str = BASE_URL
    output_file: str = OUTPUT_FILE
    svn_command: str = SVN_COMMAND
    title_prefix_bytes: int = TITLE_PREFIX_BYTES
    http_timeout: Optional[float] = None

    @classmethod
    def from_args(cls, args):
        """Build a config from parsed command line options."""
        return cls(
            level_repository=args.level_repo,
            trunk_repository=args.trunk_repo,
            project=args.project,
            base_url=args.base_url,
            output_file=args.output,
            svn_command=args.svn,
            http_timeout=args.timeout,
        )
