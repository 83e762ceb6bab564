"""SQLAlchemy-backed repository implementations.

Import concrete repositories from their modules; this package stays empty so
the domain services can import them without circular package imports.
"""
