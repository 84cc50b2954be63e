"""
tmplfuncs - template function registry

Provides value introspection, default resolution, structured containers
and random string helpers to a Jinja2 host environment.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
