# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.
import hashlib

from coursefaces.frontend.roster import assemble, collation_key, normalize_orderby, sort_users, set_collation_locale, \
    UserRecord
from coursefaces.frontend.models import User

ALICE_GRAVATAR = "https://www.gravatar.com/avatar/c160f8cc69a4f0bf2b0362752353d060?s=100&d=mp"


class TestNormalizeOrderby(object):

    def test_normalize(self):
        assert normalize_orderby("firstname") == "firstname"
        assert normalize_orderby("lastname") == "lastname"
        assert normalize_orderby("middle") == "firstname"
        assert normalize_orderby("") == "firstname"
        assert normalize_orderby(None) == "firstname"


class TestSortUsers(object):

    def test_natural_order(self):
        users = [User(username="s10", firstname="Student 10", lastname="A"),
                 User(username="s2", firstname="Student 2", lastname="A"),
                 User(username="s1", firstname="student 1", lastname="A")]
        assert [user.username for user in sort_users(users, "firstname")] == ["s1", "s2", "s10"]

    def test_ties_broken_by_other_field(self):
        users = [User(username="b", firstname="Jean", lastname="Martin"),
                 User(username="a", firstname="Jean", lastname="Dupont"),
                 User(username="c", firstname="Anne", lastname="Martin")]
        assert [user.username for user in sort_users(users, "firstname")] == ["c", "a", "b"]
        assert [user.username for user in sort_users(users, "lastname")] == ["a", "c", "b"]

    def test_accented_names(self):
        users = [User(username="zoe", firstname="Zoe"), User(username="emile", firstname="Émile"),
                 User(username="carl", firstname="Carl"), User(username="eve", firstname="eve")]
        assert [user.username for user in sort_users(users, "firstname")] == ["carl", "emile", "eve", "zoe"]

    def test_collation_locale(self):
        users = [User(username="zoe", firstname="Zoe"), User(username="oscar", firstname="Östen")]
        try:
            set_collation_locale("sv")
            assert [user.username for user in sort_users(users, "firstname")] == ["zoe", "oscar"]
        finally:
            set_collation_locale("")
        assert [user.username for user in sort_users(users, "firstname")] == ["oscar", "zoe"]

    def test_missing_names(self):
        users = [User(username="b", firstname="Bea"), User(username="a")]
        assert [user.username for user in sort_users(users, "firstname")] == ["a", "b"]


class TestAssemble(object):

    def test_firstname_order(self, make_context):
        users = assemble(make_context("faces101", "teacher"), 0, "firstname")
        assert [user.fullname for user in users] == ["Alice Zimmer", "bob Young", "Carl Xavier", "Émile Zola",
                                                     "Student 2 Numbered", "Student 10 Numbered"]

    def test_lastname_order(self, make_context):
        users = assemble(make_context("faces101", "teacher"), 0, "lastname")
        assert [user.fullname for user in users] == ["Student 2 Numbered", "Student 10 Numbered", "Carl Xavier",
                                                     "bob Young", "Alice Zimmer", "Émile Zola"]

    def test_invalid_orderby(self, make_context):
        context = make_context("faces101", "teacher")
        assert assemble(context, 0, "middle") == assemble(context, 0, "firstname")

    def test_suspended_and_staff_excluded(self, make_context):
        users = assemble(make_context("faces101", "teacher"), 0, "firstname")
        names = [user.fullname for user in users]
        assert "Sam Suspended" not in names
        assert "Tea Cher" not in names

    def test_group_filter(self, make_context):
        """ Sam belongs to the group but is suspended """
        users = assemble(make_context("faces101", "teacher"), 1, "firstname")
        assert [user.fullname for user in users] == ["Alice Zimmer", "bob Young"]

    def test_group_of_another_course(self, make_context):
        assert assemble(make_context("faces101", "teacher"), 50, "firstname") == []

    def test_unknown_group(self, make_context):
        assert assemble(make_context("faces101", "teacher"), 99, "firstname") == []

    def test_course_without_enrolment(self, make_context):
        assert assemble(make_context("other", "teacher"), 0, "firstname") == []

    def test_records(self, make_context):
        users = assemble(make_context("faces101", "teacher"), 2, "firstname")
        assert users == [
            UserRecord("Carl Xavier", "https://pictures.example.com/carl.png", "/user/carl?course=faces101"),
            UserRecord("Student 10 Numbered",
                       "https://www.gravatar.com/avatar/%s?s=100&d=mp"
                       % hashlib.md5(b"student10@example.com").hexdigest(),
                       "/user/student10?course=faces101"),
        ]

    def test_gravatar(self, make_context):
        users = assemble(make_context("workshop", "teacher"), 40, "firstname")
        assert users == [UserRecord("Alice Zimmer", ALICE_GRAVATAR, "/user/alice?course=workshop")]

    def test_picture_size(self, make_context):
        users = assemble(make_context("workshop", "teacher"), 40, "firstname", picture_size=64)
        assert users[0].picture.endswith("?s=64&d=mp")

    def test_order_is_non_decreasing(self, make_context):
        context = make_context("faces101", "teacher")
        for orderby in ["firstname", "lastname"]:
            key = collation_key(orderby)
            users = context.user_manager.get_course_enrolled_users(context.course)
            keys = [key(user) for user in sort_users(users, orderby)]
            assert keys == sorted(keys)
