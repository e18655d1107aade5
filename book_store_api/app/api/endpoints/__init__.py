"""
Endpoint modules.

Each module defines an ``APIRouter`` for one concern.  Domain routers
are aggregated in ``api/router.py``; ``health`` is mounted at the root.
"""
