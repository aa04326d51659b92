"""
Read-only REST surface for jobscope.

Quick start::

    from jobscope.api import create_app

    app = create_app()  # ready for uvicorn

Routers only translate between HTTP and
:class:`~jobscope.introspection.service.JobIntrospectionService`; every
endpoint answers ``200`` with a possibly empty list.
"""

from jobscope.api.app import create_app

__all__ = ["create_app"]
