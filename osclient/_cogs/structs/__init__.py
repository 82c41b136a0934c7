"""
All the structures coming from/to the API and the in-memory descriptors.

Structs do not do any API calls on their own: they are passed around
to the clients, which do the actual I/O.
"""
