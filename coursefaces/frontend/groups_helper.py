# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Validation of requested groups and preparation of the group selection catalog """
import logging

from collections import OrderedDict, namedtuple

from coursefaces.frontend.i18n import gettext as _

_logger = logging.getLogger("coursefaces.webapp.faces")

# Everything a roster computation needs to know about the request: the course, who is asking, and where to
# find the users and groups. The user manager is the only way the computations reach the database.
FacesContext = namedtuple("FacesContext", ["course", "username", "user_manager"])

GroupEntry = namedtuple("GroupEntry", ["id", "name", "checked"])
GroupingEntry = namedtuple("GroupingEntry", ["id", "name", "groups", "isungrouped"], defaults=[False])
SelectionResult = namedtuple("SelectionResult", ["groupings", "hasgroupings", "selectedgroups", "selectedgroupids"])

UNGROUPED_ID = 0

# Largest integer MongoDB can store
MAX_GROUP_ID = 2 ** 63 - 1


def parse_group_id(value):
    """ Returns value as a group id (an integer), or None if it is not one """
    if isinstance(value, bool):
        return None
    try:
        groupid = int(value)
    except (TypeError, ValueError):
        return None
    return groupid if abs(groupid) <= MAX_GROUP_ID else None


def validate_group(context, groupid):
    """
    Checks that a group can be used to filter the roster of the course of the context.
    :param context: a FacesContext
    :param groupid: the requested group id
    :return: the Group, or None if the id is not positive, does not exist, belongs to another course or is hidden
        from the viewer
    """
    groupid = parse_group_id(groupid)
    if groupid is None or groupid <= 0:
        return None

    group = context.user_manager.get_group(groupid)
    if group is None:
        return None

    # group ids come from the query string, they may point to any course
    if group.courseid != context.course.get_id():
        _logger.debug("Group %s does not belong to course %s", groupid, context.course.get_id())
        return None

    if not context.user_manager.is_group_visible(group, context.course, context.username):
        _logger.debug("Group %s of course %s is not visible by %s", groupid, context.course.get_id(), context.username)
        return None

    return group


def _group_entry(group, selectedgroups):
    return GroupEntry(int(group.id), group.description, int(group.id) in selectedgroups)


def prepare_group_selection(context, requested_groupids):
    """
    Build the group selection catalog and the validated selected groups.
    :param context: a FacesContext
    :param requested_groupids: the group ids requested from the user interface, in any order, possibly duplicated
    :return: a SelectionResult. Invalid ids are silently dropped.
    """
    candidates = []
    for groupid in (parse_group_id(value) for value in requested_groupids):
        if groupid is not None and groupid not in candidates:
            candidates.append(groupid)

    selectedgroups = OrderedDict()
    for groupid in candidates:
        group = validate_group(context, groupid)
        if group is not None:
            selectedgroups[groupid] = group

    course = context.course
    user_manager = context.user_manager

    groupings = []
    usedgroupids = set()
    for grouping in user_manager.get_course_groupings(course):
        groupitems = []
        for group in user_manager.get_grouping_groups(course, grouping):
            if not user_manager.is_group_visible(group, course, context.username):
                continue
            usedgroupids.add(int(group.id))
            groupitems.append(_group_entry(group, selectedgroups))

        if groupitems:
            groupings.append(GroupingEntry(int(grouping.id), grouping.description, groupitems))

    ungroupedgroups = []
    for group in user_manager.get_course_groups(course):
        if int(group.id) in usedgroupids:
            continue
        if not user_manager.is_group_visible(group, course, context.username):
            continue
        ungroupedgroups.append(_group_entry(group, selectedgroups))

    if ungroupedgroups:
        groupings.append(GroupingEntry(UNGROUPED_ID, _("Other groups"), ungroupedgroups, True))

    return SelectionResult(groupings, bool(groupings), selectedgroups, list(selectedgroups.keys()))
