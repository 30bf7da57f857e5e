# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

from mongoengine import Document, StringField, ListField, IntField, SequenceField


class Grouping(Document):
    id = SequenceField(primary_key=True, sequence_name="groupings")
    description = StringField(required=True)
    courseid = StringField(required=True)
    groups = ListField(IntField())

    meta = {"collection": "groupings", "indexes": ["courseid"]}
