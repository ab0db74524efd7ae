"""Use-case layer wrapping persistence port calls for the form workflows.

Each module calls a port and translates adapter failures into
``UseCaseError`` subclasses without touching UI state.
"""
