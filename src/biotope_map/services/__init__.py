"""
Shared service utilities.

- http.py - pre-configured ``requests.Session`` with retry and default timeout
"""
