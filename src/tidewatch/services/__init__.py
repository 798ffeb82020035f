"""
Shared utilities used by the datasources.

- http.py - ``requests.Session`` with default timeout and User-Agent
"""
