"""
Core infrastructure: settings, logging, the error taxonomy and the
storage backends.
"""
