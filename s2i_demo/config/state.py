"""
FastAPI dependencies exposing the values captured when the app is built.
All are set by create_app and never mutated afterwards.
"""

from typing import Callable

from fastapi import Request

from s2i_demo.config.settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_start_time(request: Request) -> float:
    """Clock reading taken at application start"""
    return request.app.state.start_time


def get_clock(request: Request) -> Callable[[], float]:
    return request.app.state.clock
