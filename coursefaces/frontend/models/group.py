# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

from mongoengine import Document, StringField, ListField, SequenceField


class Group(Document):
    id = SequenceField(primary_key=True, sequence_name="groups")
    description = StringField(required=True)
    courseid = StringField(required=True)
    students = ListField(StringField())

    meta = {"collection": "groups", "indexes": ["courseid"]}
