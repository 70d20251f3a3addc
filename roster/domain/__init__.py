"""
Domain layer - Department and Employee models, the per-session Directory
aggregate and the errors they raise.

Nothing in here knows about Flask or WTForms.
"""
