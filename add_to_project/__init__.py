"""Add issues and pull requests to a GitHub project when their assignees and labels match."""

__version__ = "0.1.0"
