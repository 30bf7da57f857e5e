# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Starts the webapp """
import os
import sys
import flask

from binascii import hexlify
from werkzeug.exceptions import InternalServerError
from mongoengine import connect, disconnect

from coursefaces import __version__
from coursefaces.frontend.courses import CourseFactory
from coursefaces.frontend.faces import FacesBlock
from coursefaces.frontend.flask.mapping import init_flask_mapping
from coursefaces.frontend.flask.mongo_sessions import MongoDBSessionInterface
from coursefaces.frontend.groups_helper import FacesContext
from coursefaces.frontend.i18n import gettext
from coursefaces.frontend.roster import PICTURE_SIZE, set_collation_locale
from coursefaces.frontend.user_manager import UserManager, DEFAULT_FULLNAME_FORMAT, DEFAULT_PROFILE_URL


def _put_configuration_defaults(config):
    """
    :param config: the basic configuration as a dict
    :return: the same dict, but with defaults for some unfilled parameters
    """
    if 'session_parameters' not in config or 'secret_key' not in config['session_parameters']:
        print("Please define a secret_key in the session_parameters part of the configuration.", file=sys.stderr)
        print("It must be the same as the one of the platform that authenticates your users, as sessions are "
              "shared. We generated a random key for you.", file=sys.stderr)
        print("-------------", file=sys.stderr)
        print("session_parameters:", file=sys.stderr)
        print('\tsecret_key: "{}"'.format(hexlify(os.urandom(32)).decode('utf-8')), file=sys.stderr)
        print("-------------", file=sys.stderr)
        exit(1)

    default_session_parameters = {
        "cookie_name": "coursefaces_session_id",
        "cookie_domain": None,
        "cookie_path": None,
        "timeout": 86400,  # 24 * 60 * 60, # 24 hours in seconds
        "httponly": True,
        "secure": False,
        "use_signer": True
    }
    for k, v in default_session_parameters.items():
        if k not in config['session_parameters']:
            config['session_parameters'][k] = v

    config.setdefault("courses_directory", "./courses")
    config.setdefault("superadmins", [])
    config.setdefault("fullname_format", DEFAULT_FULLNAME_FORMAT)
    config.setdefault("profile_url", DEFAULT_PROFILE_URL)
    config.setdefault("picture_size", PICTURE_SIZE)
    config.setdefault("signin_url", None)
    config.setdefault("collation_locale", "")

    # flask migration
    config["DEBUG"] = config.get("web_debug", False)
    config["SESSION_COOKIE_NAME"] = config['session_parameters']["cookie_name"]
    config["SESSION_COOKIE_DOMAIN"] = config['session_parameters']["cookie_domain"]
    config["SESSION_COOKIE_PATH"] = config['session_parameters']["cookie_path"]
    config["SESSION_COOKIE_HTTPONLY"] = config['session_parameters']["httponly"]
    config["SESSION_COOKIE_SECURE"] = config['session_parameters']["secure"]
    config["PERMANENT_SESSION_LIFETIME"] = config['session_parameters']["timeout"]
    config["SECRET_KEY"] = config['session_parameters']["secret_key"]

    return config

def get_homepath():
    """ Returns the URL root. """
    return flask.request.url_root[:-1]

def get_path(*path_parts):
    """
    :param path_parts: List of elements in the path to be separated by slashes
    """
    return "/".join((get_homepath(), ) + path_parts)

def faces_block(courseid):
    """ Link data to the roster of a course, for the templates of the host platform. Empty for viewers who cannot
    open the roster """
    app = flask.current_app
    course = app.course_factory.get_course(courseid)
    return FacesBlock(FacesContext(course, app.user_manager.session_username(), app.user_manager), get_path).export()

def _close_app():
    """ Ensures that the app is properly closed """
    disconnect()


def get_app(config):
    """
    :param config: the configuration dict
    :return: A new app
    """
    config = _put_configuration_defaults(config)

    # Init database
    connect(config.get('database', 'coursefaces'), host=config.get('mongo_opt', {}).get('host', 'localhost'),
            tz_aware=True, **config.get('mongo_client_options', {}))

    set_collation_locale(config["collation_locale"])

    flask_app = flask.Flask(__name__, static_url_path="/faces/static")

    flask_app.config.from_mapping(**config)

    flask_app.session_interface = MongoDBSessionInterface(config['session_parameters']['use_signer'], True)

    course_factory = CourseFactory(config["courses_directory"])
    user_manager = UserManager(config["superadmins"], config["fullname_format"], config["profile_url"])

    # Add some helpers for the templates
    flask_app.jinja_env.globals["_"] = gettext
    flask_app.jinja_env.globals["get_path"] = get_path
    flask_app.jinja_env.globals["pkg_version"] = __version__
    flask_app.jinja_env.globals["user_manager"] = user_manager
    flask_app.jinja_env.globals["faces_block"] = faces_block

    # Not found page
    def flask_not_found(e):
        return flask.render_template("notfound.html", message=e.description), 404
    flask_app.register_error_handler(404, flask_not_found)

    # Forbidden page
    def flask_forbidden(e):
        return flask.render_template("forbidden.html", message=e.description), 403
    flask_app.register_error_handler(403, flask_forbidden)

    # Bad request page
    def flask_bad_request(e):
        return flask.render_template("badrequest.html", message=e.description), 400
    flask_app.register_error_handler(400, flask_bad_request)

    # Enable debug mode if needed
    web_debug = config.get('web_debug', False)
    flask_app.debug = web_debug

    def flask_internalerror(e):
        return flask.render_template("internalerror.html", message=e.description), 500
    flask_app.register_error_handler(InternalServerError, flask_internalerror)

    # Insert the needed singletons into the application, to allow pages to call them
    flask_app.get_path = get_path
    flask_app.user_manager = user_manager
    flask_app.course_factory = course_factory
    flask_app.picture_size = config["picture_size"]
    flask_app.signin_url = config["signin_url"]

    # Init the mapping of the app
    init_flask_mapping(flask_app)

    return flask_app, _close_app
