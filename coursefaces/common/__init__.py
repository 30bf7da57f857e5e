# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Basic dependencies shared by the webapp and the command line tools """
