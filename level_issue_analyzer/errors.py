class LevelIssueAnalyzerError(Exception):
    """Base exception of the level issue analyzer."""


class UsageError(LevelIssueAnalyzerError):
    pass


class LogFetchError(LevelIssueAnalyzerError):
    """The svn log of a repository could not be retrieved."""

    def __init__(self, repository, reason):
        super().__init__(f"{repository}: {reason}")
        self.repository = repository
        self.reason = reason


class LogParseError(LevelIssueAnalyzerError):
    pass
