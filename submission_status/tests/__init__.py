"""Tests for status calculation and the status service."""
