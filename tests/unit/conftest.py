"""Unit test configuration.

Unit tests exercise the domain and application layers directly and do
not depend on the HTTP app.
"""
