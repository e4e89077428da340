"""Veterinary clinic portal package initializer.

The package re-exports nothing; the presence of this file is sufficient for
Python to treat ``vetportal`` as a regular package.
"""
