# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

import gettext as _gettext
import os
import flask
import builtins

from coursefaces import get_root_path

_i18n_directory = os.path.join(get_root_path(), "frontend", "i18n")


def gettext(text):
    language = flask.current_app.user_manager.session_language(default="") if flask.has_request_context() else ""
    return _translations.get(language, _gettext.NullTranslations()).gettext(text) if text else ""


_translations = {"en": _gettext.NullTranslations()} # English does not need translation ;-)
for lang in sorted(os.listdir(_i18n_directory)):
    if os.path.isfile(os.path.join(_i18n_directory, lang, "LC_MESSAGES", "messages.mo")):
        _translations[lang] = _gettext.translation('messages', _i18n_directory, [lang])

# Define _ builtin but better to explicitly import using:
# from coursefaces.frontend.i18n import gettext as _
builtins.__dict__['_'] = gettext
