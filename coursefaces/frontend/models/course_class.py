# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

from mongoengine import Document, StringField, ListField

class CourseClass(Document):
    id = StringField(primary_key=True)
    students = ListField(StringField())
    suspended = ListField(StringField())

    meta = {"collection": "courses"}
