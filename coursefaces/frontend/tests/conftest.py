# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.
import os
import uuid

import mongomock
import pytest
from mongoengine import connect, disconnect

from coursefaces.frontend.courses import CourseFactory
from coursefaces.frontend.groups_helper import FacesContext
from coursefaces.frontend.models import User, CourseClass, Group, Grouping
from coursefaces.frontend.user_manager import UserManager

COURSES_DIRECTORY = os.path.join(os.path.dirname(__file__), 'courses')

USERS = [
    ("alice", "Alice", "Zimmer", None),
    ("bob", "bob", "Young", None),
    ("carl", "Carl", "Xavier", "https://pictures.example.com/carl.png"),
    ("student2", "Student 2", "Numbered", None),
    ("student10", "Student 10", "Numbered", None),
    ("emile", "Émile", "Zola", None),
    ("sam", "Sam", "Suspended", None),
    ("teacher", "Tea", "Cher", None),
]


@pytest.fixture()
def database():
    connect("coursefaces_test_" + uuid.uuid4().hex, host="mongodb://localhost", mongo_client_class=mongomock.MongoClient)
    yield
    disconnect()


def fill_database():
    """ Users, enrolments, groups and groupings of the test courses """
    for username, firstname, lastname, picture in USERS:
        User(username=username, firstname=firstname, lastname=lastname, email=username + "@example.com",
             picture=picture).save()

    # faces101: the groups of the "Teams" grouping, nothing else
    CourseClass(id="faces101", students=["alice", "bob", "carl", "student2", "student10", "emile", "sam"],
                suspended=["sam"]).save()
    Group(id=1, description="Red", courseid="faces101", students=["alice", "bob", "sam"]).save()
    Group(id=2, description="Blue", courseid="faces101", students=["carl", "student10"]).save()
    Grouping(id=10, description="Teams", courseid="faces101", groups=[1, 2]).save()

    # workshop: an empty grouping and groups belonging to no grouping
    CourseClass(id="workshop", students=["alice", "bob"]).save()
    Group(id=40, description="Solo", courseid="workshop", students=["alice"]).save()
    Group(id=41, description="Pair", courseid="workshop", students=["alice", "bob"]).save()
    Group(id=45, description="Trio", courseid="workshop", students=[]).save()
    Grouping(id=42, description="Pairs", courseid="workshop", groups=[41]).save()
    Grouping(id=44, description="Empty", courseid="workshop", groups=[]).save()

    # separate: students only see their own groups
    CourseClass(id="separate", students=["alice", "bob"]).save()
    Group(id=20, description="Alpha", courseid="separate", students=["alice"]).save()
    Group(id=21, description="Beta", courseid="separate", students=["bob"]).save()
    Group(id=22, description="Gamma", courseid="separate", students=["bob"]).save()
    Grouping(id=30, description="Labs", courseid="separate", groups=[20, 21]).save()
    Grouping(id=31, description="Hidden", courseid="separate", groups=[21]).save()

    Group(id=50, description="Intruders", courseid="other", students=["alice"]).save()


@pytest.fixture()
def courses_directory():
    return COURSES_DIRECTORY


@pytest.fixture()
def course_factory(courses_directory):
    return CourseFactory(courses_directory)


@pytest.fixture()
def roster(database):
    fill_database()


@pytest.fixture()
def user_manager():
    return UserManager(["root"])


@pytest.fixture()
def make_context(roster, course_factory, user_manager):
    def _make(courseid, username):
        return FacesContext(course_factory.get_course(courseid), username, user_manager)
    return _make


@pytest.fixture()
def populate_database():
    """ For tests connecting to the database on their own """
    return fill_database
