# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Manages users data, groups and session """
import hashlib
import logging
import flask

from typing import List, Optional
from urllib.parse import quote
from natsort import natsorted

from coursefaces.frontend.models import User, Group, Grouping, CourseClass

DEFAULT_FULLNAME_FORMAT = "{firstname} {lastname}"
DEFAULT_PROFILE_URL = "/user/{username}?course={courseid}"
GRAVATAR_URL = "https://www.gravatar.com/avatar/{hash}?s={size}&d=mp"


class UserManager:
    def __init__(self, superadmins, fullname_format=DEFAULT_FULLNAME_FORMAT, profile_url=DEFAULT_PROFILE_URL):
        """
        :type superadmins: list(str)
        :param superadmins: list of the super-administrators' usernames
        :param fullname_format: format string used to display names, with {firstname}, {lastname} and {username}
        :param profile_url: format string of the profile page of the host platform, with {username} and {courseid}
        """
        self._session = flask.session
        self._superadmins = superadmins
        self._fullname_format = fullname_format
        self._profile_url = profile_url
        self._logger = logging.getLogger("coursefaces.webapp.users")

    ##############################################
    #           User session management          #
    ##############################################

    def session_logged_in(self):
        """ Returns True if a user is currently connected in this session, False else """
        return bool(self._session.loggedin)

    def session_username(self):
        """ Returns the username from the session, if one is open. Else, returns None"""
        if not self.session_logged_in():
            return None
        return self._session.username

    def session_realname(self):
        """ Returns the real name of the current user in the session, if one is open. Else, returns None"""
        if not self.session_logged_in():
            return None
        return self._session.realname

    def session_language(self, default="en"):
        """ Returns the current session language """
        return self._session.language or default

    def session_timezone(self):
        """ Returns the current session timezone """
        return self._session.timezone

    ##############################################
    #                User display                #
    ##############################################

    def get_user_fullname(self, user):
        """
        :param user: a User document (possibly only partially loaded)
        :return: the name of the user, as displayed on this platform
        """
        return self._fullname_format.format(firstname=user.firstname or "", lastname=user.lastname or "",
                                            username=user.username).strip()

    def get_user_picture_url(self, user, size=100):
        """
        :param user: a User document
        :param size: the size in pixels of the requested picture
        :return: the URL of the picture of the user, falling back on its Gravatar
        """
        if user.picture:
            return user.picture
        email_hash = hashlib.md5((user.email or "").strip().lower().encode("utf-8")).hexdigest()
        return GRAVATAR_URL.format(hash=email_hash, size=size)

    def get_user_profile_url(self, username, courseid):
        """ Returns the URL of the profile of a user, in the context of a course """
        return self._profile_url.format(username=quote(username, safe=""), courseid=quote(courseid, safe=""))

    ##############################################
    #               Course groups                #
    ##############################################

    def get_group(self, groupid) -> Optional[Group]:
        """ Returns the group with id groupid, or None if it does not exist """
        return Group.objects(id=groupid).first()

    def get_course_groups(self, course) -> List[Group]:
        """ Returns a list of the course groups"""
        return natsorted(list(Group.objects(courseid=course.get_id())), key=lambda x: x.description)

    def get_course_groupings(self, course) -> List[Grouping]:
        """ Returns a list of the course groupings """
        return natsorted(list(Grouping.objects(courseid=course.get_id())), key=lambda x: x.description)

    def get_grouping_groups(self, course, grouping) -> List[Group]:
        """ Returns the groups of the course belonging to a grouping """
        groups = Group.objects(courseid=course.get_id(), id__in=list(grouping.groups))
        return natsorted(list(groups), key=lambda x: x.description)

    def is_group_visible(self, group, course, username=None):
        """ Checks if a user can see a group of a course and its members

        :param group: a Group object
        :param course: a Course object
        :param username: The username of the user that we want to check. If None, uses self.session_username()
        :return: True if the group is visible by the user, False else
        """
        if username is None:
            username = self.session_username()

        if course.get_groups_mode() != "separate":
            return True

        if self.has_staff_rights_on_course(course, username):
            return True

        return username in group.students

    ##############################################
    #             Course enrolments              #
    ##############################################

    def course_is_user_registered(self, course, username=None):
        """ Checks if a user is registered

        :param course: a Course object
        :param username: The username of the user that we want to check. If None, uses self.session_username()
        :return: True if the user is registered, False else
        """
        if username is None:
            username = self.session_username()

        if self.has_staff_rights_on_course(course, username):
            return True

        return CourseClass.objects(id=course.get_id(), students=username, suspended__ne=username).first() is not None

    def get_course_registered_users(self, course):
        """
        Get the students registered to a course whose enrolment is not suspended
        :param course: a Course object
        :return: a list of usernames
        """
        course_class = CourseClass.objects(id=course.get_id()).first()
        if course_class is None:
            return []
        suspended = set(course_class.suspended)
        return [username for username in course_class.students if username not in suspended]

    def get_course_enrolled_users(self, course, groupid=0, fields=None) -> List[User]:
        """
        Get the active students of a course, possibly restricted to a group
        :param course: a Course object
        :param groupid: id of the group the users must belong to, 0 for every enrolled user
        :param fields: list of User fields to load, None to load all of them
        :return: a list of User documents, in no particular order
        """
        usernames = self.get_course_registered_users(course)
        if groupid:
            group = Group.objects(id=groupid, courseid=course.get_id()).first()
            if group is None:
                self._logger.debug("Group %s is not a group of course %s", groupid, course.get_id())
            members = set(group.students) if group is not None else set()
            usernames = [username for username in usernames if username in members]

        if not usernames:
            return []

        users = User.objects(username__in=usernames)
        if fields:
            users = users.only(*fields)
        return list(users)

    ##############################################
    #             Rights management              #
    ##############################################

    def user_is_superadmin(self, username=None):
        """
        :param username: the username. If None, the username of the currently logged in user is taken
        :return: True if the user is superadmin, False else
        """
        if username is None:
            username = self.session_username()

        return username in self._superadmins

    def has_staff_rights_on_course(self, course, username=None):
        """
        Check if a user can be considered as having staff rights for a course
        :type course: coursefaces.frontend.courses.Course
        :param username: the username. If None, the username of the currently logged in user is taken
        :return: True if the user has staff rights, False else
        """
        if username is None:
            username = self.session_username()

        return (username in course.get_staff()) or self.user_is_superadmin(username)

    def can_view_faces(self, course, username=None):
        """
        Check if a user can see the roster of a course: staff always can, registered students only if the course
        allows it.
        """
        if username is None:
            username = self.session_username()

        if self.has_staff_rights_on_course(course, username):
            return True

        return course.is_faces_open_to_students() and self.course_is_user_registered(course, username)
