"""
General-purpose helpers not related to the API client itself
(neither to the transport nor to the resource families nor to the structs),
which are used to prepare and control the runtime environment.

As a rule of thumb, helpers MUST be abstracted from the client
to such an extent that they could be extracted as reusable libraries.
"""
