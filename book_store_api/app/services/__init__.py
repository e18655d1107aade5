"""
Service layer abstraction.

Services encapsulate the business rules and talk to the store; API
handlers only translate between HTTP and service calls.  Swapping the
in-memory store for a database therefore leaves the handlers untouched.
"""
