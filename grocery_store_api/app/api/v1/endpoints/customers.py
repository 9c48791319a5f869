"""
Customer endpoints for API v1.

These routes expose list, get, create and update operations for
customer records.  There is no delete.  An empty store answers the
list route with HTTP 404, and create/update reject a missing or
invalid body with HTTP 400 and a short message.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from grocery_store_api.app.core.storage import JsonFileDataService, StorageError, get_data_service
from grocery_store_api.app.schemas.customer import Customer
from grocery_store_api.app.services.customer_service import CustomerService

router = APIRouter()

logger = logging.getLogger(__name__)


def get_customer_service(
    data_service: JsonFileDataService = Depends(get_data_service),
) -> CustomerService:
    return CustomerService(data_service)


def parse_customer(payload: Any) -> Customer:
    """Validate a raw request body, raising HTTP 400 on failure."""
    if payload is None:
        logger.warning("Rejected customer payload: body is null")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Customer object is null")
    try:
        return Customer.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Rejected customer payload: %s", exc.errors())
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid model object")


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer an unparseable request body with HTTP 400.

    Errors on path or query parameters keep FastAPI's default 422.
    """
    if not any(tuple(error.get("loc", ()))[:1] == ("body",) for error in exc.errors()):
        return await request_validation_exception_handler(request, exc)
    logger.warning("Rejected customer payload: %s", exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid model object"})


@router.get("/", response_model=List[Customer])
async def list_customers(service: CustomerService = Depends(get_customer_service)) -> List[Customer]:
    """Return all customers, or 404 if there are none."""
    customers = await service.list_customers()
    if not customers:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customers


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    customer = await service.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.post("/", response_model=Customer, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: Request,
    response: Response,
    payload: Any = Body(None),
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    """Append a customer to the store.

    The ``Location`` header points at the new customer's GET route.
    Duplicate identifiers are accepted.  An unreadable store answers 500
    and is left untouched.
    """
    customer = parse_customer(payload)
    try:
        customer = await service.create_customer(customer)
    except StorageError as exc:
        logger.error("Could not create customer %s: %s", customer.id, exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Customer store unavailable")
    response.headers["Location"] = str(request.url_for("get_customer", customer_id=customer.id))
    return customer


@router.put("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_customer(
    customer_id: int,
    payload: Any = Body(None),
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Replace the name of an existing customer."""
    customer = parse_customer(payload)
    updated = await service.update_customer(customer_id, customer)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
