# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

import tzlocal

from mongoengine import Document, StringField


class User(Document):
    username = StringField(required=True)
    firstname = StringField(required=True)
    lastname = StringField(required=True)
    email = StringField(required=True)
    picture = StringField(default=None)
    language = StringField(required=True, default="en")
    timezone = StringField(default=lambda: tzlocal.get_localzone_name())

    meta = {"collection": "users", "indexes": ["username"]}
