# /school_admin/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that Base.metadata knows about every
# table before `init_db` creates them.

from .base_class import Base

from .models.class_student_models import Class, Student
from .models.attendance_models import Attendance
