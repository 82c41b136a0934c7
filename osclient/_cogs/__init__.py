"""
Internal cogs of the client: everything not exposed publicly as is.

The public interface is re-exported from the top-level ``osclient`` package.
The internal layout can change at any time without notice.
"""
