from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from s2i_demo.constants.app_constants import ALL_METHODS
from s2i_demo.routes.any_method_route import AnyMethodRoute
from s2i_demo.constants.home_page import HOME_PAGE_HTML

router = APIRouter(route_class=AnyMethodRoute)


@router.api_route("/", methods=ALL_METHODS, response_class=HTMLResponse, include_in_schema=False)
async def home():
    """Landing page listing the available endpoints"""
    return HTMLResponse(content=HOME_PAGE_HTML)
