"""Draft and open a GitHub pull request for the current branch."""
