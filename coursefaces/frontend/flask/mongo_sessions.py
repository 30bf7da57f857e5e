# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.
#
# This code is based on Flask-Session, copyright (c) 2014 by Shipeng Feng.
# https://flasksession.readthedocs.io/

from datetime import datetime, timezone

from mongoengine.errors import ValidationError
from itsdangerous import Signer, BadSignature
from flask.sessions import SessionInterface

from coursefaces.frontend.models import Session


class MongoDBSessionInterface(SessionInterface):
    """A read-only Session interface that uses mongodb as backend. Sessions are created and updated by the host
    platform, which authenticates users; this application only reads them.
    :param use_signer: Whether the session id cookie is signed or not.
    :param permanent: Whether to use permanent session or not.
    """

    def __init__(self, use_signer=False, permanent=True):
        self.use_signer = use_signer
        self.permanent = permanent

    def _get_signer(self, app):
        if not app.secret_key:
            return None
        return Signer(app.secret_key, salt='flask-session', key_derivation='hmac')

    def open_session(self, app, request):
        sid = request.cookies.get(self.get_cookie_name(app))

        if not sid:
            return Session(permanent=self.permanent)

        if self.use_signer:
            signer = self._get_signer(app)
            if signer is None:
                return None
            try:
                sid_as_bytes = signer.unsign(sid)
                sid = sid_as_bytes.decode()
            except BadSignature:
                return Session(permanent=self.permanent)

        try:
            document = Session.objects(id=sid).first()
        except ValidationError:
            return Session(permanent=self.permanent)

        if document and document.expiration and document.expiration <= datetime.now(timezone.utc):
            # Expired sessions are cleaned by the host platform
            document = None
        return document or Session(permanent=self.permanent)

    def save_session(self, app, session, response):
        pass
