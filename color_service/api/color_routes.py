"""
Color API endpoints.
Query strings are parsed into Color values; anything missing or unparseable is rejected with 400.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from color_service.api.dependencies import get_color_registry
from color_service.core.config import get_settings
from color_service.core.logging_config import get_logger
from color_service.models.color import Color
from color_service.schemas.api_schemas import (
    ColorListResponse, ErrorResponse, HexColorResponse, InterpolationResponse, RGBColorResponse
)
from color_service.services.color_calculation_service import (
    brightest, interpolate, parse_int, parse_rgb_string
)
from color_service.services.color_registry import ColorRegistry

router = APIRouter(prefix="/api/color", tags=["Colors"])
logger = get_logger(__name__)

BAD_REQUEST_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def bad_request(message: str) -> HTTPException:
    """Build a 400 error carrying a human readable message."""
    logger.warning(f"Rejected request: {message}")
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


@router.get("/random", response_model=HexColorResponse)
async def random_color(registry: ColorRegistry = Depends(get_color_registry)):
    """Return a random color in hex format."""
    return HexColorResponse(color=registry.get_random_color().to_hex())


@router.get("/to-rgb", response_model=RGBColorResponse, responses=BAD_REQUEST_RESPONSES)
async def to_rgb(color: Optional[str] = Query(default=None, description="Hex color, e.g. B4DA55")):
    """Convert a hex color to [red, green, blue]."""
    if not color:
        raise bad_request("Bad request. Provide a color parameter to the query string in hex format (ie: FFFFFF)")

    parsed = Color.from_hex(color)
    if parsed is None:
        raise bad_request("Bad request. The color hex string provided could not be parsed correctly.")

    return RGBColorResponse(color=parsed.get_components())


@router.get("/to-hex", response_model=HexColorResponse, responses=BAD_REQUEST_RESPONSES)
async def to_hex(color: Optional[str] = Query(default=None, description="Color as R-G-B, e.g. 180-218-85")):
    """Convert an R-G-B color to hex format."""
    if not color:
        raise bad_request("Bad request. Provide a color parameter to the query string in this format: 255-255-255 (r-g-b)")

    parsed = parse_rgb_string(color)
    if parsed is None:
        raise bad_request(
            "Bad request. Provide a color parameter to the query string in this format: 255-255-255 (r-g-b) "
            "where every component is an integer"
        )

    return HexColorResponse(color=parsed.to_hex())


@router.get("/brightest", response_model=HexColorResponse, responses=BAD_REQUEST_RESPONSES)
async def brightest_color(
    color1: Optional[str] = Query(default=None, description="First hex color"),
    color2: Optional[str] = Query(default=None, description="Second hex color"),
):
    """
    Return the brighter of two hex colors.

    A color is brighter when the average of its components is greater; color1 wins ties.
    """
    if not color1 or not color2:
        raise bad_request("Bad request. You should provide 2 colors (color1, color2) in the query string in hex format")

    first = Color.from_hex(color1)
    second = Color.from_hex(color2)
    if first is None or second is None:
        raise bad_request("Bad request. Unable to parse the colors correctly.")

    return HexColorResponse(color=brightest(first, second).to_hex())


@router.get(
    "/list",
    response_model=ColorListResponse,
    responses={
        **BAD_REQUEST_RESPONSES,
        status.HTTP_204_NO_CONTENT: {"description": "Color added to the list"},
    },
)
async def color_list(
    color: Optional[str] = Query(default=None, description="Hex color to add to the list"),
    registry: ColorRegistry = Depends(get_color_registry),
):
    """
    Without a color, return the recent colors list (oldest first).
    With a color, validate it and add it to the list, evicting the oldest entry when full.
    """
    if not color:
        return ColorListResponse(colors=registry.list)

    parsed = Color.from_hex(color)
    if parsed is None:
        raise bad_request("Bad request. Unable to parse the color's hex string correctly.")

    registry.push(parsed.to_hex())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/dealers-choice", response_model=InterpolationResponse, responses=BAD_REQUEST_RESPONSES)
async def dealers_choice(
    color1: Optional[str] = Query(default=None, description="Start hex color"),
    color2: Optional[str] = Query(default=None, description="End hex color"),
    steps: Optional[str] = Query(default=None, description="Number of divisions between the colors"),
):
    """Interpolate between two colors, returning the steps - 1 colors between them."""
    if not color1 or not color2 or not steps:
        raise bad_request("Bad request! You should pass in color1 and color2 (as hex) and how many steps")

    start = Color.from_hex(color1)
    end = Color.from_hex(color2)
    if start is None or end is None:
        raise bad_request("Bad request! Could not properly parse the colors.")

    step_count = parse_int(steps)
    if step_count is None:
        raise bad_request("Bad request. Could not parse the steps parameter.")

    max_steps = get_settings().MAX_INTERPOLATION_STEPS
    if step_count > max_steps:
        raise bad_request(f"Bad request. The steps parameter can't be greater than {max_steps}.")

    return InterpolationResponse(steps=[color.to_hex() for color in interpolate(start, end, step_count)])
