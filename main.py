#This file is for development purposes only
#Usage: python main.py <project> <version>

from jira_version_checker.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
