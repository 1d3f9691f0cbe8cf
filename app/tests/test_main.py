import main

from fastapi import FastAPI


def test_main_exposes_server_app():
    assert isinstance(main.server_app, FastAPI)


def test_main_server_app_publishes_intl():
    intl = main.server_app.state.intl

    assert intl.default_locale == "en-US"
    assert intl.default_module_name == "global"


def test_main_server_app_routes():
    route_paths = [str(route.path) for route in main.server_app.routes]

    assert "/health" in route_paths
    assert "/intl/locale" in route_paths
