"""
Houses the tests for the access layer of the program, which is the only
code that speaks to the database.

Asynchronous tests run under pytest-asyncio in auto mode, so no marker is needed.
"""
