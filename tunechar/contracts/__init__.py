"""Boundary contracts (configs, results, errors).

Contracts only depend on stdlib + pydantic.
"""
