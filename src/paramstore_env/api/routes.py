"""FastAPI routes."""

from typing import List

from fastapi import APIRouter, HTTPException, Request

from ..domain.host import ListOption
from ..service.descriptor import BuildWrapperDescriptor
from .schemas import DescriptorResponse, ErrorResponse, ListOptionResponse, ListOptionsResponse

router = APIRouter()


def get_descriptor_from_request(request: Request) -> BuildWrapperDescriptor:
    """Get the descriptor from request state."""
    if not hasattr(request.state, "descriptor") or request.state.descriptor is None:
        raise HTTPException(status_code=500, detail="Descriptor not initialized")
    return request.state.descriptor


def _to_response(options: List[ListOption]) -> ListOptionsResponse:
    return ListOptionsResponse(
        options=[ListOptionResponse(name=option.name, value=option.value) for option in options]
    )


@router.get("/descriptor", response_model=DescriptorResponse, response_model_by_alias=True)
async def get_descriptor(http_request: Request) -> DescriptorResponse:
    """Get the build wrapper descriptor."""
    descriptor = get_descriptor_from_request(http_request)
    return DescriptorResponse(
        displayName=descriptor.display_name,
        applicable=descriptor.is_applicable(),
    )


@router.get(
    "/descriptor/credentials",
    response_model=ListOptionsResponse,
    responses={500: {"model": ErrorResponse}},
)
async def fill_credentials_id_items(http_request: Request) -> ListOptionsResponse:
    """List selectable AWS credentials identifiers."""
    descriptor = get_descriptor_from_request(http_request)
    try:
        return _to_response(descriptor.fill_credentials_id_items())
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Cannot list credentials: {e}") from e


@router.get(
    "/descriptor/regions",
    response_model=ListOptionsResponse,
    responses={500: {"model": ErrorResponse}},
)
async def fill_region_name_items(http_request: Request) -> ListOptionsResponse:
    """List selectable AWS region names."""
    descriptor = get_descriptor_from_request(http_request)
    try:
        return _to_response(descriptor.fill_region_name_items())
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Cannot list regions: {e}") from e
