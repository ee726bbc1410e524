"""Utility scripts for running the contract suite.

Scripts include:
- ``run_contract_tests.py``: run the live contract tests through pytest.
"""
