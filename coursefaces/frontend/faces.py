# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" View models of the roster pages: everything the templates display, computed from the request parameters """
import logging
import zoneinfo

from collections import OrderedDict
from datetime import datetime
from urllib.parse import urlencode

from coursefaces.frontend.i18n import gettext as _
from coursefaces.frontend.groups_helper import validate_group, prepare_group_selection
from coursefaces.frontend.roster import assemble, normalize_orderby, Section, PICTURE_SIZE

SHOW_PATH = ("faces", "show")
PRINT_PATH = ("faces", "print")
DATE_FORMAT = "%d %B %Y"

_logger = logging.getLogger("coursefaces.webapp.faces")


def default_get_path(*path_parts):
    """ Builds an absolute path from its parts, when no application is there to prefix it """
    return "/" + "/".join(path_parts)


def make_url(path, params):
    """
    :param path: the path of the page
    :param params: an (ordered) dict of query parameters. None values are skipped, lists are repeated.
    :return: the URL, with its query string
    """
    query = urlencode([(key, value) for key, value in params.items() if value is not None], doseq=True)
    return path + "?" + query if query else path


def current_date(timezone=None):
    """ Returns the current date, formatted for display, in the given timezone (the server one if invalid) """
    try:
        tz = zoneinfo.ZoneInfo(timezone) if timezone else None
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        tz = None
    return datetime.now(tz).strftime(DATE_FORMAT)


class _FacesView(object):
    """ Shared parts of the roster pages """

    def __init__(self, context, orderby, groupids, get_path=None, timezone=None, picture_size=PICTURE_SIZE):
        """
        :param context: a FacesContext
        :param orderby: requested sort field
        :param groupids: requested group ids, for the multi-group selection
        :param get_path: function building a path from its parts, as Flask app.get_path
        :param timezone: the timezone used to display the current date
        :param picture_size: the size of the user pictures, in pixels
        """
        self._context = context
        self._orderby = orderby
        self._groupids = list(groupids or [])
        self._get_path = get_path or default_get_path
        self._timezone = timezone
        self._picture_size = picture_size

    def _url(self, path, **params):
        return make_url(self._get_path(*path), OrderedDict([("cid", self._context.course.get_id())] + sorted(params.items())))

    def _assemble(self, groupid, orderby):
        return assemble(self._context, groupid, orderby, self._picture_size)

    def _group_sections(self, selectedgroups, orderby):
        """ One section per selected group, in selection order """
        sections = []
        for groupid, group in selectedgroups.items():
            users = self._assemble(groupid, orderby)
            sections.append(Section(groupid, group.description, users, bool(users)))
        return sections

    def _common(self, orderby):
        course = self._context.course
        return {
            "courseid": course.get_id(),
            "coursename": course.get_name(),
            "courseshortname": course.get_shortname(),
            "currentdate": current_date(self._timezone),
            "orderby": orderby,
        }


class FacesPage(_FacesView):
    """ The interactive roster page, filtered by a single group or split in sections for several groups """

    def __init__(self, context, groupid, orderby, groupids=None, showfilters=True, **kwargs):
        super(FacesPage, self).__init__(context, orderby, groupids, **kwargs)
        self._groupid = groupid
        self._showfilters = showfilters

    def export(self):
        """ Returns the template context of the page """
        context = self._context
        orderby = normalize_orderby(self._orderby)

        validated_group = validate_group(context, self._groupid)
        groupid = int(validated_group.id) if validated_group is not None else 0

        groupdata = prepare_group_selection(context, self._groupids)
        selectedgroups = groupdata.selectedgroups
        selectedgroupids = groupdata.selectedgroupids
        displaysections = bool(selectedgroups)

        users = []
        sections = []
        if displaysections:
            sections = self._group_sections(selectedgroups, orderby)
        else:
            users = self._assemble(groupid, orderby)

        _logger.debug("Roster of course %s for %s: group %s, selection %s, order %s", context.course.get_id(),
                      context.username, groupid, selectedgroupids, orderby)

        data = self._common(orderby)
        data.update({
            "groupid": groupid,
            "users": users,
            "hasusers": bool(users),
            "showfilters": self._showfilters,
            "isprint": not self._showfilters,
            "displaysections": displaysections,
            "sections": sections,
            "selectedgroupids": selectedgroupids,
            "printurl": self._print_url(orderby, groupid, selectedgroupids),
            "groupselection": self._group_selection(groupdata, orderby, groupid),
        })

        if self._showfilters:
            data["orderselect"] = {
                "url": self._url(SHOW_PATH, groupid=groupid, groupids=selectedgroupids or None),
                "options": OrderedDict([("firstname", _("First name")), ("lastname", _("Last name"))]),
                "selected": orderby,
            }
            data["groupselect"] = {
                "url": self._url(SHOW_PATH, orderby=orderby),
                "options": self._group_options(),
                "selected": groupid,
            }

        return data

    def _group_options(self):
        """ Options of the single group filter: every group the viewer can see """
        context = self._context
        options = OrderedDict([(0, _("Show all"))])
        for group in context.user_manager.get_course_groups(context.course):
            if context.user_manager.is_group_visible(group, context.course, context.username):
                options[int(group.id)] = group.description
        return options

    def _group_selection(self, groupdata, orderby, groupid):
        return {
            "actionurl": self._url(SHOW_PATH),
            "orderby": orderby,
            "groupings": groupdata.groupings,
            "hasgroupings": groupdata.hasgroupings,
            "showreset": bool(groupdata.selectedgroups),
            "reseturl": self._url(SHOW_PATH, orderby=orderby, groupid=groupid),
            "expanded": not groupdata.selectedgroups,
        }

    def _print_url(self, orderby, groupid, selectedgroupids):
        if selectedgroupids:
            return self._url(PRINT_PATH, orderby=orderby, groupids=selectedgroupids)
        elif groupid:
            return self._url(PRINT_PATH, orderby=orderby, groupid=groupid)
        return self._url(PRINT_PATH, orderby=orderby)


class FacesPrintPage(_FacesView):
    """ The printable roster page, always split in sections: one per selected group, or one for everybody """

    def export(self):
        """ Returns the template context of the page """
        orderby = normalize_orderby(self._orderby)

        groupdata = prepare_group_selection(self._context, self._groupids)
        selectedgroups = groupdata.selectedgroups

        if selectedgroups:
            sections = self._group_sections(selectedgroups, orderby)
        else:
            users = self._assemble(0, orderby)
            sections = [Section(0, _("Show all"), users, bool(users), True)]

        data = self._common(orderby)
        data.update({
            "actionurl": self._url(PRINT_PATH, orderby=orderby),
            "groupings": groupdata.groupings,
            "hasgroupings": groupdata.hasgroupings,
            "selectedgroupids": groupdata.selectedgroupids,
            "sections": sections,
            "hassections": bool(sections),
            "showreset": bool(selectedgroups),
            "reseturl": self._url(PRINT_PATH, orderby=orderby),
        })
        return data


class FacesBlock(object):
    """ The link to the roster of a course, to be embedded in the course page of the host platform """

    def __init__(self, context, get_path=None):
        """
        :param context: a FacesContext
        :param get_path: function building a path from its parts, as Flask app.get_path
        """
        self._context = context
        self._get_path = get_path or default_get_path

    def export(self):
        """ Returns the link data, or an empty dict if the viewer cannot open the roster """
        context = self._context
        if not context.username or not context.user_manager.can_view_faces(context.course, context.username):
            return {}
        return {
            "showfacesurl": make_url(self._get_path(*SHOW_PATH), {"cid": context.course.get_id()}),
            "imageurl": self._get_path("faces", "static", "faces.svg"),
            "linktext": _("Show all"),
        }
