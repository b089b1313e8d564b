# Services package init
"""
BirdRef Backend — Services Layer
==================================

What:  Everything between the HTTP routes and the database.

Service Inventory:
    - BirdStore (abstract): execute parameterized SQL, return rowcount + rows
    - SqlAlchemyBirdStore: BirdStore over the pooled async SQLAlchemy engine
    - BirdService: builds one statement per bird operation and maps outcomes
      to response models or application exceptions
"""
