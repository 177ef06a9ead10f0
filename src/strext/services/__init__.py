"""Service layer — wraps domain utilities into ServiceResult.

Services may import from domain and config layers.
They must never import from commands or output.
"""
