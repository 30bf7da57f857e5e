# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Some utils for all the pages """
import logging

from flask import redirect, current_app
from flask.views import MethodView
from werkzeug.exceptions import NotFound, Forbidden, InternalServerError

from coursefaces.common.exceptions import InvalidNameException, CourseNotFoundException, CourseUnreadableException
from coursefaces.frontend.courses import Course, CourseFactory
from coursefaces.frontend.i18n import gettext as _
from coursefaces.frontend.user_manager import UserManager


class CoursefacesPage(MethodView):
    """
    A base for all the pages of the coursefaces webapp
    """

    @property
    def app(self):
        """ Returns the web application singleton """
        return current_app

    @property
    def user_manager(self) -> UserManager:
        """ Returns the user manager singleton """
        return self.app.user_manager

    @property
    def course_factory(self) -> CourseFactory:
        """ Returns the course factory singleton """
        return self.app.course_factory

    @property
    def logger(self) -> logging.Logger:
        """ Logger """
        return logging.getLogger('coursefaces.webapp')

    def get_course(self, courseid) -> Course:
        """ Return the course, or raise NotFound """
        try:
            return self.course_factory.get_course(courseid)
        except (InvalidNameException, CourseNotFoundException):
            raise NotFound(description=_("Course not found."))
        except CourseUnreadableException as e:
            self.logger.error("Course %s is unreadable: %s", courseid, str(e))
            raise InternalServerError(description=_("This course cannot be displayed."))


class CoursefacesAuthPage(CoursefacesPage):
    """
    Augmented version of CoursefacesPage that checks if the user is authenticated.
    """

    def GET_AUTH(self, *args, **kwargs):  # pylint: disable=unused-argument
        raise NotFound()

    def get(self, *args, **kwargs):
        """
        Checks if user is authenticated and calls GET_AUTH or redirects to the sign-in page of the host platform
        :param args:
        :param kwargs:
        :return:
        """
        if self.user_manager.session_logged_in() and self.user_manager.session_username():
            return self.GET_AUTH(*args, **kwargs)

        if self.app.signin_url:
            return redirect(self.app.signin_url)
        raise Forbidden(description=_("You must be logged in to access this page."))
