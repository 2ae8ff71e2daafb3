"""Tests for :mod:`submission_status.services`."""
