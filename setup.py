from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh.readlines() if line.strip()]

setup(
    name="level-issue-analyzer",
    version="1.0.0",
    author="Level Issue Analyzer",
    author_email="example@example.com",
    description="Lists the JIRA issues fixed since the last level of an svn repository",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/level-issue-analyzer",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["level_issues"],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'level-issue-analyzer=level_issue_analyzer.analyze_level_issues:main',
        ],
    },
)
