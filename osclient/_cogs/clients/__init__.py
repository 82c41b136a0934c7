"""
All the routines to talk to the API: the transport and the resource families.

The transport (:mod:`rest`) is generic: it builds the URLs, encodes & decodes
the bodies, and checks the responses. The families (builds, images, etc)
only bind the transport to their resource references and namespaces.
"""
