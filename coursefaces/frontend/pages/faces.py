# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Roster pages """
from flask import request, render_template
from werkzeug.exceptions import BadRequest, Forbidden

from coursefaces.frontend.faces import FacesPage, FacesPrintPage
from coursefaces.frontend.i18n import gettext as _
from coursefaces.frontend.groups_helper import FacesContext
from coursefaces.frontend.pages.utils import CoursefacesAuthPage


class BaseFacesPage(CoursefacesAuthPage):
    """ Reads the roster parameters from the query string and checks the rights of the viewer """

    def get_context(self):
        """ Returns the FacesContext of the request, or raises BadRequest/NotFound/Forbidden """
        courseid = request.args.get("cid")
        if not courseid:
            raise BadRequest(description=_("Missing course id."))

        course = self.get_course(courseid)
        username = self.user_manager.session_username()
        if not self.user_manager.can_view_faces(course, username):
            self.logger.info("User %s is not allowed to see the roster of course %s", username, courseid)
            raise Forbidden(description=_("You are not allowed to see the members of this course."))

        return FacesContext(course, username, self.user_manager)

    def get_params(self):
        """ Returns the requested orderby and group ids. Unparsable group ids are dropped. """
        orderby = request.args.get("orderby", "firstname")
        groupids = request.args.getlist("groupids", type=int) + request.args.getlist("groupids[]", type=int)
        return orderby, groupids

    def get_view_options(self):
        return {
            "get_path": self.app.get_path,
            "timezone": self.user_manager.session_timezone(),
            "picture_size": self.app.picture_size,
        }


class ShowFacesPage(BaseFacesPage):
    """ Interactive roster page """

    def GET_AUTH(self):  # pylint: disable=arguments-differ
        """ GET request """
        context = self.get_context()
        orderby, groupids = self.get_params()
        groupid = request.args.get("groupid", 0, type=int)

        page = FacesPage(context, groupid, orderby, groupids, showfilters=True, **self.get_view_options())
        return render_template("faces/show.html", course=context.course, **page.export())


class PrintFacesPage(BaseFacesPage):
    """ Printable roster page """

    def GET_AUTH(self):  # pylint: disable=arguments-differ
        """ GET request """
        context = self.get_context()
        orderby, groupids = self.get_params()
        groupid = request.args.get("groupid", 0, type=int)
        if not groupids and groupid:
            groupids = [groupid]

        page = FacesPrintPage(context, orderby, groupids, **self.get_view_options())
        return render_template("faces/print.html", course=context.course, **page.export())
