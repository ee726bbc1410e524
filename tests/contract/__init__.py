"""Live API contract tests.

These tests call the real dog API and validate that its public endpoints
conform to the agreed response envelopes. They need network access and are
only selected with ``-m contract`` (see ``scripts/run_contract_tests.py``).
"""
