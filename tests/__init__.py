"""Tests for the contract harness.

Unit tests at this level run offline against an in-memory fake of the dog
API. Live checks against the real service are under ``tests/contract`` and
are only collected when the ``contract`` marker is selected.
"""
