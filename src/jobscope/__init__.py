"""
jobscope: read-only introspection over a running job scheduler.

Lists configured jobs with an aggregate status (active, last fire, next
fire), a job's parameters and triggers, and the job and trigger groups.

Layers:
    - ``jobscope.core``: errors, logging, settings, timestamp helpers
    - ``jobscope.introspection``: engine protocol, classifier, aggregator, service
    - ``jobscope.api``: read-only FastAPI surface
    - ``jobscope.cli``: ``jobscope`` command line
"""

__version__ = "0.1.0"
