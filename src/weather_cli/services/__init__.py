"""
Shared service utilities.

- http.py - pre-configured ``requests.Session`` (default timeout, User-Agent, no retries)
"""
