"""MAILINGLIST command-line interface."""
