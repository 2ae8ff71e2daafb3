"""Tests for :mod:`submission_status.domain`."""
