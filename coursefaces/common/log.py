# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Some common functions for logging """
import logging

def init_logging(log_level=logging.DEBUG):
    """
    Init logging
    :param log_level: An integer representing the log level or a string representing one
    """
    logging.root.handlers = []  # remove possible side-effects from other libs

    # Log format
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    ch.setFormatter(formatter)

    # Base coursefaces logger
    coursefaces_log = logging.getLogger("coursefaces")
    coursefaces_log.setLevel(log_level)
    coursefaces_log.addHandler(ch)

    # Set werkzeug dev server log to same format to improve reading
    werkzeug_log = logging.getLogger("werkzeug")
    werkzeug_log.setLevel(log_level)
    werkzeug_log.addHandler(ch)
