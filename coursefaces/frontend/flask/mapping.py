# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" URL mapping of the webapp """

from coursefaces.frontend.pages.faces import ShowFacesPage, PrintFacesPage


def init_flask_mapping(flask_app):
    flask_app.add_url_rule('/faces/show', view_func=ShowFacesPage.as_view('showfacespage'))
    flask_app.add_url_rule('/faces/print', view_func=PrintFacesPage.as_view('printfacespage'))
