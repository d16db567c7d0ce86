"""Remote mirror of locally stored rounds.

- Best-effort forwarding to the external object store
- Forbidden: mutating local rounds, blocking the local save path
"""
