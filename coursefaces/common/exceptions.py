# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Some common exceptions """


class InvalidNameException(Exception):
    """ Invalid name (course id, ...) """
    pass


class CourseNotFoundException(Exception):
    """ The course descriptor does not exist """
    pass


class CourseUnreadableException(Exception):
    """ The course descriptor exists but cannot be read """
    pass
