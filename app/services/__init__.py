"""
Services of the application.

The services map the schemas (DTOs) to the database models and back, apply the
business rules (password hashing, token issuance, cascades) and delegate the
persistence to the `db_objects` modules. Every service function changing the
database runs as one transaction.
"""
