# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Basic functions for coursefaces """
import json
import re

import yaml


def id_checker(id_to_test):
    """Checks if a id is correct"""
    return bool(re.match(r'^[a-zA-Z0-9_\-]+$', id_to_test))


def loads_json_or_yaml(file_path, content):
    """ Load JSON or YAML depending on the file extension. Returns a dict """
    if file_path.endswith(".yaml") or file_path.endswith(".yml"):
        return yaml.safe_load(content)
    else:
        return json.loads(content)


def load_json_or_yaml(file_path):
    """ Load JSON or YAML depending on the file extension. Returns a dict """
    with open(file_path, "r") as f:
        return loads_json_or_yaml(file_path, f.read())
