"""Adapter package for entity service implementations.

Purpose:
    Collect concrete implementations of the entity service port used by the
    form sessions: REST client, local JSON files and an in-memory double.

Dependencies:
    ``entity_rest`` and ``http_client`` depend on ``requests``; the others use
    the filesystem or plain lists.

Call context:
    Imported by ``sellerdesk.app.controller`` for runtime wiring and by tests.
"""
