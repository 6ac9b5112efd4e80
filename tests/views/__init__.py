"""
Houses the tests for the HTTP layer of the program: the two api routes,
the liveness route, and the monitor page.

The tests assert that the shape of the responses remains stable,
and that every failure (bad input, an unreachable database)
comes back as the same bare server error.
The views run against an in-memory sqlite database.
"""
