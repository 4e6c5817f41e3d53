"""Issue tracker integration for ugh."""

from ugh.jira.client import JiraClient


__all__ = ["JiraClient"]
