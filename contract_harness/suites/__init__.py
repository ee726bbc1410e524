"""Case tables for external APIs.

- ``dog_api``: the dog image catalog at https://dog.ceo/api.
"""
