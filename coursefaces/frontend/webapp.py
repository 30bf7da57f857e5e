# -*- coding: utf-8 -*-
#
# This file is part of coursefaces. See the LICENSE file for more information
# about the licensing of this file.

""" Command line: starts the coursefaces webapp with the development server """
import argparse
import logging
import os

from werkzeug.serving import run_simple

from coursefaces.common.base import load_json_or_yaml
from coursefaces.common.log import init_logging
from coursefaces.frontend.app import get_app


def main(args=None):
    parser = argparse.ArgumentParser(description="Starts the coursefaces webapp")
    parser.add_argument("--config", help="Path to configuration file. By default: configuration.yaml or configuration.json",
                        default="")
    parser.add_argument("--host", help="Host to bind to. Default is localhost.", default="localhost")
    parser.add_argument("--port", help="Port to listen to. Default is 8080.", type=int, default=8080)
    args = parser.parse_args(args)

    if args.config == "":
        if os.path.isfile("./configuration.yaml"):
            args.config = "./configuration.yaml"
        elif os.path.isfile("./configuration.json"):
            args.config = "./configuration.json"
        else:
            parser.error("No configuration file found. Please specify one with --config")

    config = load_json_or_yaml(args.config)
    init_logging(config.get("log_level", "INFO"))
    logging.getLogger("coursefaces.webapp").info("Starting coursefaces on %s:%s", args.host, args.port)

    app, close_app_func = get_app(config)
    try:
        run_simple(args.host, args.port, app, use_debugger=config.get("web_debug", False), threaded=True)
    finally:
        close_app_func()


if __name__ == "__main__":
    main()
