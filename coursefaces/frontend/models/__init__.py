# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

from coursefaces.frontend.models.course_class import CourseClass
from coursefaces.frontend.models.group import Group
from coursefaces.frontend.models.grouping import Grouping
from coursefaces.frontend.models.session import Session
from coursefaces.frontend.models.user import User
