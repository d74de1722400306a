"""Write the level issue report to the console and a text file."""


def format_report_line(url, title):
    return f"{url} : {title}"


class ReportWriter:
    """Write report lines to stdout and to a freshly truncated file.

    Use as a context manager so the file is closed even when resolving a
    title fails half way through.
    """

    def __init__(self, path):
        self.path = path
        self.lines_written = 0
        self._file = None

    def __enter__(self):
        self._file = open(self.path, 'w', encoding='utf-8')
        return self

    def __exit__(self, exc_type, exc, tb):
        self._file.close()
        self._file = None
        return False

    def write(self, url, title):
        line = format_report_line(url, title)
        print(line)
        self._file.write(line + '\n')
        self.lines_written += 1
