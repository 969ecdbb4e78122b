"""Registry — the persisted catalog of programs.

The registry provides:
- Models: the ``Program`` record and its ``ProgType``
- Storage: a YAML config file keyed by program name
- Operations: new / add / edit / remove / list on top of the store
"""
