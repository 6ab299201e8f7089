# /school_admin/db/base_class.py

from sqlalchemy.orm import declarative_base

# Every ORM model inherits from this Base so that a single metadata object
# knows about all tables.
Base = declarative_base()
