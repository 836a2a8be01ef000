"""
API package containing the HTTP routes.

Routes are grouped under versioned subpackages such as ``v1``, each
exposing a top‑level ``router``.
"""
