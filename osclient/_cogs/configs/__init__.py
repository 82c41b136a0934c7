"""
The connection configuration of the client and the ways to obtain it.
"""
