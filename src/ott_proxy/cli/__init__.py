"""CLI layer — entry point, interactive prompt, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, but ``core`` never imports from ``cli``.
"""
