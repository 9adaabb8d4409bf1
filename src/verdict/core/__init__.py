"""Core data types shared by the synchronous and asynchronous wrappers."""
