# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Course descriptors, as read from the courses directory """
import os

from coursefaces.common.base import id_checker, load_json_or_yaml
from coursefaces.common.exceptions import InvalidNameException, CourseNotFoundException, CourseUnreadableException

GROUPS_MODES = ["none", "visible", "separate"]


class Course(object):
    """ A course, as seen by the roster pages """

    def __init__(self, courseid, content):
        self._id = courseid
        self._content = content

        try:
            self._name = self._content['name']
        except KeyError:
            raise CourseUnreadableException("Course has an invalid name: " + self.get_id())

        self._shortname = self._content.get('shortname', courseid)
        self._admins = self._content.get('admins', [])
        self._tutors = self._content.get('tutors', [])
        self._groups_mode = self._content.get('groups_mode', 'visible')
        self._faces_students = bool(self._content.get('faces_students', False))

        if self._groups_mode not in GROUPS_MODES:
            raise CourseUnreadableException("Course has an invalid value for groups_mode: " + self.get_id())

    def get_id(self):
        """ Return the _id of this course """
        return self._id

    def get_name(self):
        """ Return the display name of this course """
        return self._name

    def get_shortname(self):
        return self._shortname

    def get_staff(self):
        """ Returns a list containing the usernames of all the staff users """
        return list(set(self.get_tutors() + self.get_admins()))

    def get_admins(self):
        """ Returns a list containing the usernames of the administrators of this course """
        return self._admins

    def get_tutors(self):
        """ Returns a list containing the usernames of the tutors assigned to this course """
        return self._tutors

    def get_groups_mode(self):
        """ Returns "none", "visible" or "separate". In separate mode, students only see their own groups """
        return self._groups_mode

    def is_faces_open_to_students(self):
        """ Returns True if registered students may see the roster of this course """
        return self._faces_students


class CourseFactory(object):
    """ Load courses from the courses directory, each course being a folder containing a course.yaml file """

    def __init__(self, courses_directory):
        self._directory = courses_directory

    def get_course(self, courseid) -> Course:
        """ Fetch the course with id courseid """
        if not id_checker(courseid):
            raise InvalidNameException("Course with invalid name: " + courseid)

        path = os.path.join(self._directory, courseid, "course.yaml")
        if not os.path.isfile(path):
            raise CourseNotFoundException()

        try:
            content = load_json_or_yaml(path)
        except Exception as e:
            raise CourseUnreadableException(str(e))

        if not isinstance(content, dict):
            raise CourseUnreadableException("Course descriptor is not a mapping: " + courseid)

        return Course(courseid, content)
