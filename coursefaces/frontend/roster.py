# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Assembles the display-ready list of the users enrolled in a course """
import logging

from collections import namedtuple

import icu

ORDER_FIELDS = ["firstname", "lastname"]
DEFAULT_ORDER = "firstname"
PICTURE_SIZE = 100

# Fields loaded from the database, enough to display a name and a picture
USER_FIELDS = ["username", "firstname", "lastname", "email", "picture"]

_logger = logging.getLogger("coursefaces.webapp.faces")

UserRecord = namedtuple("UserRecord", ["fullname", "picture", "profileurl"])
Section = namedtuple("Section", ["groupid", "groupname", "users", "hasusers", "isall"], defaults=[False])


def normalize_orderby(orderby):
    """ Returns orderby if it is a valid sort field, the default sort field otherwise """
    return orderby if orderby in ORDER_FIELDS else DEFAULT_ORDER


def make_collator(locale_name=""):
    """
    Returns an ICU collator for locale_name (the root collation if empty) comparing digits as numbers, so that
    "Student 2" sorts before "Student 10". Accented letters sort with their base letter.
    """
    try:
        collator = icu.Collator.createInstance(icu.Locale(locale_name) if locale_name else icu.Locale.getRoot())
    except icu.ICUError:
        _logger.warning("Cannot sort names with locale %s, using the root collation", locale_name)
        collator = icu.Collator.createInstance(icu.Locale.getRoot())
    collator.setAttribute(icu.UCollAttribute.NUMERIC_COLLATION, icu.UCollAttributeValue.ON)
    return collator


_collator = make_collator()


def set_collation_locale(locale_name):
    """ Sets the locale used to sort names """
    global _collator
    _collator = make_collator(locale_name)


def collation_key(orderby):
    """
    Returns the key function used to sort users on the field orderby, in natural order, following the collation
    rules of the configured locale. The other name field breaks ties.
    """
    orderby = normalize_orderby(orderby)
    secondary = "lastname" if orderby == "firstname" else "firstname"
    sort_key = _collator.getSortKey
    return lambda user: (sort_key(getattr(user, orderby) or ""), sort_key(getattr(user, secondary) or ""))


def sort_users(users, orderby):
    """ Sorts a list of users, as User documents, on orderby """
    return sorted(users, key=collation_key(orderby))


def assemble(context, groupid, orderby, picture_size=PICTURE_SIZE):
    """
    Fetches the active users enrolled in the course of the context and prepares them for display.
    :param context: a FacesContext
    :param groupid: the id of the group the users must belong to, 0 for all the enrolled users
    :param orderby: "firstname" or "lastname". Any other value falls back to "firstname"
    :param picture_size: the size of the user pictures, in pixels
    :return: a list of UserRecord, sorted
    """
    user_manager = context.user_manager
    courseid = context.course.get_id()

    users = user_manager.get_course_enrolled_users(context.course, groupid, USER_FIELDS)
    users = sort_users(users, normalize_orderby(orderby))

    return [UserRecord(user_manager.get_user_fullname(user),
                       user_manager.get_user_picture_url(user, picture_size),
                       user_manager.get_user_profile_url(user.username, courseid))
            for user in users]
