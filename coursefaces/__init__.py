# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" coursefaces: course roster ("faces") pages for course platforms """

import os

__version__ = "1.0.0"


def get_root_path():
    """ Returns the coursefaces root path """
    return os.path.abspath(os.path.dirname(__file__))
