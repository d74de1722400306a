#!/usr/bin/env python3
"""Run the level issue analyzer from a source checkout."""

from level_issue_analyzer.analyze_level_issues import main

if __name__ == "__main__":
    main()
