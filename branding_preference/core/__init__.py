"""Core utilities and shared primitives for branding preference management.

Modules in this package should be framework-agnostic where possible and
focused on configuration, error handling, and small reusable helpers.
"""

