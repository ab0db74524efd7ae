"""ViewModel package for form and list state.

Call context:
    ``sellerdesk/app/main.py`` and ``sellerdesk/app/form_controller.py``
    import concrete view models from this package and bind dialog callbacks
    to them.

Dependencies:
    Modules here depend on domain types, formatting helpers and the small
    use-case wrappers around the entity service port. Transport and file I/O
    stay in adapters.

Responsibilities:
    - Hold raw editable field values and per-field errors.
    - Run the validate, save, notify cycle of an entity form session.
    - Render entity lists into display rows.
"""
