# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

import tzlocal
from bson.objectid import ObjectId
from mongoengine import Document, StringField, BooleanField, DateTimeField, ObjectIdField


class Session(Document):
    """ Session shared with the host platform, which is in charge of authenticating users """
    id = ObjectIdField(primary_key=True, default=lambda: ObjectId()) # id should be available at creation time
    permanent = BooleanField(required=True)
    loggedin = BooleanField(required=True, default=False)
    expiration = DateTimeField()
    email = StringField()
    language = StringField(default="en")
    realname = StringField()
    username = StringField()
    timezone = StringField(default=lambda: tzlocal.get_localzone_name())

    meta = {"collection": "sessions", "indexes": ["expiration"]}
