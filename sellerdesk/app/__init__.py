"""Application composition layer for the Tkinter client.

Modules here wire settings, entity services, form view models and dialogs
into runnable desktop workflows without placing business logic in views.
"""
