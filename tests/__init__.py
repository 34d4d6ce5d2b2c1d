"""Test suite for github-activity."""
