"""
API package containing the HTTP routes.

``router`` aggregates the domain routers and is mounted under ``/api``
by ``main.create_app``.  Routes that live outside ``/api`` (such as the
health check) are included by the application directly.
"""
