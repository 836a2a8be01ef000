"""
Service layer abstraction.

Each service encapsulates the logic for one concern: the gift list
operations and the gift idea search passthrough.  Route handlers only
translate between HTTP and these services.
"""
