"""
Core application engine for orchestrating a vendoring run.

The `VendorManager` drives the run, delegating specifier resolution to
the `ManifestResolver`.
"""
