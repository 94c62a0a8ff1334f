"""Routing: exact-match route table and the Router that resolves against it.

The table is built once at startup and never changes afterwards.
"""
