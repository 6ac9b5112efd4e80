"""
The service package holds the functions that
talk to the datastore on behalf of the views.
"""
