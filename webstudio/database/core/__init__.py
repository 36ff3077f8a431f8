"""
Service functions that compose DAOs inside `@transactional` (see `funcs`).
"""
